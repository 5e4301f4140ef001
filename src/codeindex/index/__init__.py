"""
Public API for the index data structures.
"""
from .inverted import InvertedKeywordIndex
from .stats import compute_stats

__all__ = [
    "InvertedKeywordIndex",
    "compute_stats",
]
