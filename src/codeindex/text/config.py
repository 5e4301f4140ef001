"""
Configuration for tokenization and keyword extraction.
"""

import re

from codeindex.config import get_int_env

TEXT_CONFIG = {
    "min_token_length": 3,  # Tokens shorter than this are dropped
    "max_content_chars": get_int_env("MAX_CONTENT_CHARS", 200_000, minimum=1),  # Soft cap per element
}

# Alphanumeric runs; underscores and punctuation both act as separators
TOKEN_PATTERN = re.compile(r"[^\W_]+")

# Identifier-like words that start lowercase (e.g. "login", "findUser")
IDENTIFIER_PATTERN = re.compile(r"\b[a-z][a-zA-Z0-9]*\b")

# Common English words and generic keywords that carry no search signal
STOPWORDS = frozenset({
    "the", "and", "for", "are", "but", "not", "you", "all", "can", "her",
    "was", "one", "our", "out", "get", "has", "him", "his", "how", "its",
    "may", "new", "now", "old", "see", "two", "way", "who", "boy", "did",
    "let", "put", "say", "she", "too", "use", "var", "const", "function",
})

# Technical vocabulary matched as substrings of the lowercased content
TECH_TERMS = (
    "async",
    "await",
    "interface",
    "class",
    "function",
    "const",
    "let",
    "export",
    "import",
    "type",
    "extends",
    "implements",
    "void",
    "return",
    "if",
    "else",
    "for",
    "while",
    "try",
    "catch",
    "throw",
    "new",
    "promise",
    "callback",
    "event",
    "handler",
)
