"""
Helpers shared by the keyword, semantic and hybrid searches.
"""

from typing import List, Optional

from codeindex.logging_config import logger
from codeindex.schemas import CodeElement, SearchResult
from .config import HYBRID_SEARCH_CONFIG


def clamp_limit(limit: Optional[int]) -> int:
    """
    Normalize a caller-supplied result limit.

    None falls back to the configured default; zero or negative values are
    clamped to 1 rather than rejected.
    """
    if limit is None:
        return HYBRID_SEARCH_CONFIG["default_limit"]
    if limit <= 0:
        logger.debug(f"Clamping non-positive limit {limit} to 1")
        return 1
    return int(limit)


def query_terms(query: str) -> List[str]:
    """Lowercased whitespace-separated query terms, deduplicated in order."""
    seen = []
    for term in (query or "").lower().split():
        if term not in seen:
            seen.append(term)
    return seen


def find_highlights(content: str, query: str, max_highlights: int = None) -> List[str]:
    """
    Lines of content that contain any query term, trimmed.

    Args:
        content: Element content
        query: Raw search query
        max_highlights: Maximum number of lines (default from config)

    Returns:
        Up to max_highlights matching lines in content order
    """
    if max_highlights is None:
        max_highlights = HYBRID_SEARCH_CONFIG["max_highlights"]

    terms = query_terms(query)
    if not terms or not content:
        return []

    highlights: List[str] = []
    for line in content.split("\n"):
        lower_line = line.lower()
        if any(term in lower_line for term in terms):
            highlights.append(line.strip())
            if len(highlights) >= max_highlights:
                break
    return highlights


def to_search_result(element: CodeElement, relevance: float, query: str) -> SearchResult:
    return SearchResult(
        id=element.id,
        file_path=element.file_path,
        name=element.name,
        type=element.element_type,
        relevance=relevance,
        highlights=find_highlights(element.content, query),
    )
