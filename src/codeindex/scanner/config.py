"""
Configuration for source discovery and element extraction.
"""

# Default patterns to ignore, mimicking common global gitignore settings
DEFAULT_IGNORE_PATTERNS = [
    ".git/",
    "__pycache__/",
    ".pytest_cache/",
    ".codeindex/",
    "build/",
    "dist/",
    "*.egg-info/",
    ".venv/",
    "venv/",
    "node_modules/",
    "*.pyc",
    "*.pyo",
]

SCANNER_CONFIG = {
    "extensions": [".py", ".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs"],
    "max_bytes": 1_000_000,  # Skip files larger than 1MB
}

# Suffix -> extraction strategy
LANGUAGE_BY_SUFFIX = {
    ".py": "python",
    ".ts": "javascript",
    ".tsx": "javascript",
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
}
