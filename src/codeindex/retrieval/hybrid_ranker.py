"""
Hybrid ranking fusion (keyword + vector).

Weighted reciprocal rank fusion: an id at 0-based rank r in a list with
weight w contributes w / (r + 1), and contributions are summed across lists.
"""

from typing import Dict, List

from loguru import logger

from codeindex.exceptions import ConfigError
from codeindex.schemas import SearchResult


def validate_weights(keyword_weight: float, semantic_weight: float) -> None:
    """
    Raises:
        ConfigError: If either weight is negative
    """
    if keyword_weight < 0 or semantic_weight < 0:
        raise ConfigError(
            f"Fusion weights must be non-negative (keyword={keyword_weight}, semantic={semantic_weight})"
        )


def weighted_rank_fusion(
    keyword_results: List[SearchResult],
    vector_results: List[SearchResult],
    keyword_weight: float = 0.4,
    semantic_weight: float = 0.6,
) -> List[SearchResult]:
    """
    Combine two rankings by summing weight / (rank + 1) per id.

    A list with zero weight contributes nothing, so ids that appear only in
    that list are left out of the fused ranking.

    Args:
        keyword_results: Ranked keyword search results
        vector_results: Ranked vector search results
        keyword_weight: Weight of the keyword ranking
        semantic_weight: Weight of the vector ranking

    Returns:
        SearchResult list sorted by fused score descending, ties broken by id.
        Relevance holds the fused score; highlights come from the first list
        the id was found in.
    """
    validate_weights(keyword_weight, semantic_weight)

    scores: Dict[str, float] = {}
    first_seen: Dict[str, SearchResult] = {}

    for results, weight in ((keyword_results, keyword_weight), (vector_results, semantic_weight)):
        if weight == 0:
            continue
        for rank, result in enumerate(results):
            scores[result.id] = scores.get(result.id, 0.0) + weight / (rank + 1)
            first_seen.setdefault(result.id, result)

    ranked = sorted(scores.items(), key=lambda pair: (-pair[1], pair[0]))

    fused = [
        first_seen[element_id].model_copy(update={"relevance": score})
        for element_id, score in ranked
    ]

    logger.info(
        f"Weighted fusion combined {len(keyword_results)} keyword + {len(vector_results)} vector = "
        f"{len(fused)} results (weights: {keyword_weight}/{semantic_weight})"
    )
    return fused
