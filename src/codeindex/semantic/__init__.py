"""
Semantic layer: embedding generators and the vector store.
"""

from .embeddings import (
    EmbeddingGenerator,
    HashingEmbeddingGenerator,
    SentenceTransformerEmbeddingGenerator,
    create_embedding_generator,
    hash_word,
)
from .vector_store import InMemoryVectorStore, cosine_similarity

__all__ = [
    "EmbeddingGenerator",
    "HashingEmbeddingGenerator",
    "SentenceTransformerEmbeddingGenerator",
    "create_embedding_generator",
    "hash_word",
    "InMemoryVectorStore",
    "cosine_similarity",
]
