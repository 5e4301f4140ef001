"""
Configuration for embeddings and vector similarity.
"""

from codeindex.config import get_int_env

EMBEDDING_CONFIG = {
    "dimension": get_int_env("DIMENSION", 128, minimum=1),  # Hashing embedding width
    "model": "all-MiniLM-L6-v2",  # Model used by the sentence-transformers generator
    "normalize_embeddings": True,
}
