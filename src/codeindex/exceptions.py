# Custom exceptions for codeindex

class CodeIndexError(Exception):
    """Base exception for all application-specific errors."""
    pass

class ConfigError(CodeIndexError):
    """Raised for configuration-related problems."""
    pass

class InvalidElementError(CodeIndexError):
    """Raised when a code element cannot be built from the caller's arguments."""
    def __init__(self, element_id: str, message: str):
        self.element_id = element_id
        self.message = message
        super().__init__(f"Invalid element '{element_id}': {message}")
