from collections import Counter
from typing import Iterable, Mapping

from codeindex.schemas import CodeElement, IndexStats


def compute_stats(
    elements: Iterable[CodeElement],
    keyword_count: int,
    file_registry: Mapping[str, str],
) -> IndexStats:
    """
    Compute aggregate counters from the live index structures.
    """
    type_counts = Counter(element.element_type for element in elements)

    return IndexStats(
        total_embeddings=sum(type_counts.values()),
        total_keywords=keyword_count,
        files_indexed=len(file_registry),
        element_types=dict(type_counts),
    )
