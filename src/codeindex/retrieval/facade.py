"""
Search engine facade over the keyword index and the vector store.
"""

from typing import List, Mapping

from codeindex.index import InvertedKeywordIndex
from codeindex.logging_config import logger
from codeindex.schemas import CodeElement, SearchResult
from codeindex.semantic import EmbeddingGenerator, InMemoryVectorStore
from .config import HYBRID_SEARCH_CONFIG
from .hybrid_ranker import validate_weights, weighted_rank_fusion
from .keyword_search import keyword_search
from .utils import clamp_limit
from .vector_search import vector_search


class SearchEngine:
    """
    Read-only view over the index structures answering keyword, semantic
    and hybrid queries.

    The engine never mutates what it is given; callers are responsible for
    holding whatever lock protects the structures while a query runs.
    """

    def __init__(
        self,
        elements: Mapping[str, CodeElement],
        keyword_index: InvertedKeywordIndex,
        vector_store: InMemoryVectorStore,
        embedder: EmbeddingGenerator,
    ):
        self.elements = elements
        self.keyword_index = keyword_index
        self.vector_store = vector_store
        self.embedder = embedder

    def search_by_keyword(self, query: str, limit: int = None) -> List[SearchResult]:
        return keyword_search(query, self.keyword_index, self.elements, limit=clamp_limit(limit))

    def search_by_embedding(self, query: str, limit: int = None) -> List[SearchResult]:
        return vector_search(query, self.vector_store, self.elements, self.embedder, limit=clamp_limit(limit))

    def search(
        self,
        query: str,
        keyword_weight: float = None,
        semantic_weight: float = None,
        limit: int = None,
    ) -> List[SearchResult]:
        """
        Hybrid search: fuse keyword and semantic rankings.

        Args:
            query: Search query
            keyword_weight: Weight for keyword ranking (default 0.4)
            semantic_weight: Weight for semantic ranking (default 0.6)
            limit: Number of results (default 5, clamped to at least 1)

        Returns:
            SearchResult list with fused scores as relevance
        """
        if keyword_weight is None:
            keyword_weight = HYBRID_SEARCH_CONFIG["keyword_weight"]
        if semantic_weight is None:
            semantic_weight = HYBRID_SEARCH_CONFIG["semantic_weight"]
        validate_weights(keyword_weight, semantic_weight)

        limit = clamp_limit(limit)
        candidates = limit * HYBRID_SEARCH_CONFIG["candidate_multiplier"]

        keyword_results = self.search_by_keyword(query, candidates)
        vector_results = self.search_by_embedding(query, candidates)

        fused = weighted_rank_fusion(
            keyword_results,
            vector_results,
            keyword_weight=keyword_weight,
            semantic_weight=semantic_weight,
        )

        logger.debug(f"Hybrid search for '{query}': {len(fused)} fused, returning top {limit}")
        return fused[:limit]
