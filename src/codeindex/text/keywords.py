"""
Keyword extraction for the inverted index.
"""

from typing import Any, Set

from .config import IDENTIFIER_PATTERN, STOPWORDS, TECH_TERMS, TEXT_CONFIG
from .tokenizer import normalize_text


def is_stopword(word: str) -> bool:
    return word.lower() in STOPWORDS


def extract_keywords(content: Any) -> Set[str]:
    """
    Derive the searchable keyword set of a piece of code.

    The set is the union of:
    - identifier-like words (starting lowercase) longer than two characters
      that are not stopwords, lowercased
    - technical terms found anywhere in the lowercased content

    Args:
        content: Element content

    Returns:
        Set of lowercase keywords (possibly empty)
    """
    text = normalize_text(content)
    if not text:
        return set()

    min_length = TEXT_CONFIG["min_token_length"]
    keywords: Set[str] = set()

    for match in IDENTIFIER_PATTERN.finditer(text):
        word = match.group(0)
        if len(word) >= min_length and not is_stopword(word):
            keywords.add(word.lower())

    content_lower = text.lower()
    for term in TECH_TERMS:
        if term in content_lower:
            keywords.add(term)

    return keywords
