"""
Embedding generators.

The search engine only depends on the EmbeddingGenerator interface; the
hashing generator is the default and a sentence-transformers model can be
plugged in without touching the search code.
"""

from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, List, TYPE_CHECKING

import numpy as np

from codeindex.exceptions import ConfigError
from codeindex.logging_config import logger
from codeindex.text import normalize_text, tokenize
from .config import EMBEDDING_CONFIG

if TYPE_CHECKING:
    from sentence_transformers import SentenceTransformer


def hash_word(word: str) -> int:
    """
    Deterministic 32-bit string hash (h = h * 31 + code point).

    Wraps to a signed 32-bit integer at every step and returns the absolute
    value, so results are stable across processes (unlike built-in hash()).
    """
    h = 0
    for char in word:
        h = ((h << 5) - h + ord(char)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


def l2_normalize(vector: np.ndarray) -> np.ndarray:
    """Divide by the L2 magnitude; a zero vector is returned unchanged."""
    magnitude = float(np.linalg.norm(vector))
    if magnitude == 0.0:
        return vector
    return vector / magnitude


class EmbeddingGenerator(ABC):
    """
    Capability interface for turning text into a fixed-length vector.
    """

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Length of every vector returned by embed()."""

    @abstractmethod
    def embed(self, text: Any) -> np.ndarray:
        """Embed a single text. Must not raise on arbitrary input."""

    def embed_texts(self, texts: List[Any]) -> np.ndarray:
        """Embed a batch of texts into a (len(texts), dimension) matrix."""
        if not texts:
            return np.zeros((0, self.dimension))
        return np.stack([self.embed(text) for text in texts])


class HashingEmbeddingGenerator(EmbeddingGenerator):
    """
    Bag-of-words embedding: every token increments slot hash(token) % D.

    A deterministic stand-in for a learned model. Vectors are L2-normalized;
    text with no tokens maps to the zero vector.
    """

    def __init__(self, dimension: int = None):
        if dimension is None:
            dimension = EMBEDDING_CONFIG["dimension"]
        if dimension <= 0:
            raise ConfigError(f"Embedding dimension must be positive, got {dimension}")
        self._dimension = dimension

    @property
    def dimension(self) -> int:
        return self._dimension

    def embed(self, text: Any) -> np.ndarray:
        vector = np.zeros(self._dimension, dtype=float)
        for token in tokenize(text):
            vector[hash_word(token) % self._dimension] += 1.0
        return l2_normalize(vector)

    def __repr__(self) -> str:
        return f"HashingEmbeddingGenerator(dimension={self._dimension})"


@lru_cache(maxsize=1)
def get_model(model_name: str = "all-MiniLM-L6-v2") -> "SentenceTransformer":
    """
    Lazy load a sentence-transformers model only when it is first used.

    Args:
        model_name: HuggingFace model identifier

    Returns:
        Loaded SentenceTransformer model

    Raises:
        ConfigError: If the optional ``semantic`` extra is not installed
    """
    # Lazy import to avoid loading torch unless a model generator is used
    try:
        from sentence_transformers import SentenceTransformer
    except ImportError as e:
        raise ConfigError("sentence-transformers is not installed; install codeindex[semantic]") from e

    logger.warning(f"Loading embedding model '{model_name}' into RAM.")
    return SentenceTransformer(model_name)


class SentenceTransformerEmbeddingGenerator(EmbeddingGenerator):
    """
    EmbeddingGenerator backed by a sentence-transformers model.

    Requires the optional ``semantic`` extra.
    """

    def __init__(self, model_name: str = None):
        self.model_name = model_name or EMBEDDING_CONFIG["model"]

    @property
    def dimension(self) -> int:
        return int(get_model(self.model_name).get_sentence_embedding_dimension())

    def embed(self, text: Any) -> np.ndarray:
        return self.embed_texts([text])[0]

    def embed_texts(self, texts: List[Any]) -> np.ndarray:
        if not texts:
            return np.zeros((0, self.dimension))
        model = get_model(self.model_name)
        encoded = model.encode(
            [normalize_text(text) for text in texts],
            convert_to_numpy=True,
            normalize_embeddings=EMBEDDING_CONFIG["normalize_embeddings"],
        )
        return np.array(encoded, dtype=float)


def create_embedding_generator(kind: str = "hashing", **kwargs) -> EmbeddingGenerator:
    """
    Build an embedding generator by name ("hashing" or "sentence-transformers").

    Raises:
        ConfigError: For an unknown generator name
    """
    if kind == "hashing":
        return HashingEmbeddingGenerator(**kwargs)
    if kind == "sentence-transformers":
        return SentenceTransformerEmbeddingGenerator(**kwargs)
    raise ConfigError(f"Unknown embedding generator '{kind}'")
