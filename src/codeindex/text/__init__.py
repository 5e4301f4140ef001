"""
Text processing: tokenization and keyword extraction.
"""

from .tokenizer import tokenize, normalize_text, TokenStream
from .keywords import extract_keywords

__all__ = [
    "tokenize",
    "normalize_text",
    "TokenStream",
    "extract_keywords",
]
