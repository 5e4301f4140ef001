"""
Keyword search over the inverted index.

Multi-word queries use OR semantics: an element matches if it contains any
query term, and its relevance is the fraction of query terms it contains.
A single-term query therefore scores every match at 1.0.
"""

from collections import Counter
from typing import List, Mapping

from codeindex.logging_config import logger
from codeindex.index import InvertedKeywordIndex
from codeindex.schemas import CodeElement, SearchResult
from .utils import clamp_limit, query_terms, to_search_result


def keyword_search(
    query: str,
    keyword_index: InvertedKeywordIndex,
    elements: Mapping[str, CodeElement],
    limit: int = 5,
) -> List[SearchResult]:
    """
    Look up each query term in the inverted index and rank the matches.

    Args:
        query: Search query
        keyword_index: Inverted keyword index
        elements: Indexed elements by id
        limit: Maximum number of results (clamped to at least 1)

    Returns:
        SearchResult list sorted by relevance descending, ties broken by id
    """
    limit = clamp_limit(limit)
    terms = query_terms(query)

    if not terms:
        logger.debug("Empty keyword query")
        return []

    hits: Counter = Counter()
    for term in terms:
        for element_id in keyword_index.lookup(term):
            hits[element_id] += 1

    ranked = sorted(
        ((element_id, count / len(terms)) for element_id, count in hits.items() if element_id in elements),
        key=lambda pair: (-pair[1], pair[0]),
    )

    results = [to_search_result(elements[element_id], relevance, query) for element_id, relevance in ranked[:limit]]

    logger.info(f"Keyword search for '{query}' returned {len(results)} results")
    return results
