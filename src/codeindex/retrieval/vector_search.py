"""
Vector semantic search over the in-memory vector store.
"""

from typing import List, Mapping

from codeindex.logging_config import logger
from codeindex.schemas import CodeElement, SearchResult
from codeindex.semantic import EmbeddingGenerator, InMemoryVectorStore
from .utils import clamp_limit, to_search_result


def vector_search(
    query: str,
    vector_store: InMemoryVectorStore,
    elements: Mapping[str, CodeElement],
    embedder: EmbeddingGenerator,
    limit: int = 5,
) -> List[SearchResult]:
    """
    Perform vector semantic search.

    The query is embedded with the same generator used at indexing time and
    compared against every stored vector.

    Args:
        query: Search query
        vector_store: Store holding one vector per element id
        elements: Indexed elements by id
        embedder: Embedding generator used for indexing
        limit: Number of top results (clamped to at least 1)

    Returns:
        SearchResult list sorted by cosine similarity descending, ties broken by id
    """
    limit = clamp_limit(limit)

    if len(vector_store) == 0:
        return []

    query_vec = embedder.embed(query)
    ranked = [pair for pair in vector_store.rank(query_vec) if pair[0] in elements]

    results = [to_search_result(elements[element_id], score, query) for element_id, score in ranked[:limit]]

    logger.info(f"Vector search for '{query}' returned {len(results)} results")
    return results
