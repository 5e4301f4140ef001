"""
This facade exposes the public API for the scanner module.
Other parts of the application should only import from here, not from
internal modules.
"""
from .extractor import extract_elements
from .facade import collect_elements, index_project, walk_sources

__all__ = [
    "extract_elements",
    "collect_elements",
    "index_project",
    "walk_sources",
]
