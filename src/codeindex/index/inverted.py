"""
Inverted keyword index: keyword -> ids of the elements that contain it.
"""

from typing import Dict, FrozenSet, Iterable, Iterator, Set


class InvertedKeywordIndex:
    """
    Posting lists keyed by lowercase keyword.

    Empty posting sets are dropped on removal so len() only counts keywords
    that still have at least one element.
    """

    def __init__(self):
        self._postings: Dict[str, Set[str]] = {}

    def insert(self, keyword: str, element_id: str) -> None:
        self._postings.setdefault(keyword, set()).add(element_id)

    def insert_all(self, keywords: Iterable[str], element_id: str) -> None:
        for keyword in keywords:
            self.insert(keyword, element_id)

    def remove(self, keyword: str, element_id: str) -> None:
        postings = self._postings.get(keyword)
        if postings is None:
            return
        postings.discard(element_id)
        if not postings:
            del self._postings[keyword]

    def remove_all(self, keywords: Iterable[str], element_id: str) -> None:
        for keyword in keywords:
            self.remove(keyword, element_id)

    def lookup(self, keyword: str) -> FrozenSet[str]:
        """Ids posted under a keyword (empty for unknown keywords)."""
        return frozenset(self._postings.get(keyword, ()))

    def keywords_for(self, element_id: str) -> Set[str]:
        """Every keyword an id is posted under (linear scan over all postings)."""
        return {keyword for keyword, ids in self._postings.items() if element_id in ids}

    def __len__(self) -> int:
        return len(self._postings)

    def __contains__(self, keyword: str) -> bool:
        return keyword in self._postings

    def __iter__(self) -> Iterator[str]:
        return iter(self._postings)
