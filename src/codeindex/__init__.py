"""
codeindex - Hybrid code search index

Keyword (inverted index) and semantic (vector) search over code elements,
fused into a single ranking, with content-hash driven incremental updates.
"""

__version__ = "0.1.0"

from codeindex.code_index import CodeIndex
from codeindex.schemas import CodeElement, ElementSpec, IndexStats, ReindexReport, SearchResult
from codeindex.semantic import EmbeddingGenerator, HashingEmbeddingGenerator
from codeindex.scanner import index_project

__all__ = [
    "__version__",
    "CodeIndex",
    "CodeElement",
    "ElementSpec",
    "IndexStats",
    "ReindexReport",
    "SearchResult",
    "EmbeddingGenerator",
    "HashingEmbeddingGenerator",
    "index_project",
]
