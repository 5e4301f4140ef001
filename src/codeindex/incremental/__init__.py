"""
Incremental indexing: per-file element replacement driven by content hashes.
"""

from .hashing import content_hash
from .indexer import IncrementalIndexer, to_spec

__all__ = [
    "IncrementalIndexer",
    "content_hash",
    "to_spec",
]
