"""
Retrieval module for hybrid search (keyword + vector).

Public API for searching indexed code elements.
"""

from .facade import SearchEngine
from .hybrid_ranker import weighted_rank_fusion
from .keyword_search import keyword_search
from .vector_search import vector_search
from .utils import clamp_limit, find_highlights

__all__ = [
    "SearchEngine",
    "weighted_rank_fusion",
    "keyword_search",
    "vector_search",
    "clamp_limit",
    "find_highlights",
]
