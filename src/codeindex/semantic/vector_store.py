from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from codeindex.logging_config import logger


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine similarity of two vectors.

    Returns 0.0 when the lengths differ or either vector has zero magnitude.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.shape != b.shape:
        return 0.0

    magnitude = float(np.linalg.norm(a)) * float(np.linalg.norm(b))
    if magnitude == 0.0:
        return 0.0
    return float(np.dot(a, b)) / magnitude


class InMemoryVectorStore:
    """
    Minimal in-memory vector store keyed by element id.
    """

    def __init__(self):
        self._vectors: Dict[str, np.ndarray] = {}

    def put(self, element_id: str, vector: Sequence[float]) -> None:
        self._vectors[element_id] = np.asarray(vector, dtype=float)

    def remove(self, element_id: str) -> None:
        self._vectors.pop(element_id, None)

    def get(self, element_id: str) -> Optional[np.ndarray]:
        return self._vectors.get(element_id)

    def similarity(self, element_id: str, query_vector: Sequence[float]) -> float:
        """Cosine similarity between a stored vector and a query; 0.0 for unknown ids."""
        vector = self._vectors.get(element_id)
        if vector is None:
            return 0.0
        return cosine_similarity(vector, query_vector)

    def rank(self, query_vector: Sequence[float]) -> List[Tuple[str, float]]:
        """
        Score every stored vector against the query.

        Returns:
            (element_id, similarity) pairs sorted by similarity descending,
            ties broken by id
        """
        if not self._vectors:
            logger.debug("Vector store is empty.")
            return []

        query = np.asarray(query_vector, dtype=float)
        ids = list(self._vectors)
        matrix = np.stack([self._vectors[element_id] for element_id in ids])

        if matrix.shape[1] != query.shape[0]:
            logger.warning(
                f"Query dimension {query.shape[0]} does not match stored dimension {matrix.shape[1]}"
            )
            scores = np.zeros(len(ids))
        else:
            denominators = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query)
            dots = matrix @ query
            scores = np.divide(
                dots,
                denominators,
                out=np.zeros_like(dots),
                where=denominators > 0,
            )

        ranked = sorted(zip(ids, scores.tolist()), key=lambda pair: (-pair[1], pair[0]))
        return ranked

    def __len__(self) -> int:
        return len(self._vectors)

    def __contains__(self, element_id: str) -> bool:
        return element_id in self._vectors

    def __iter__(self) -> Iterator[str]:
        return iter(self._vectors)
