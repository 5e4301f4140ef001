"""
Tokenizer shared by keyword extraction and embedding generation.
"""

from typing import Any, Iterator

from .config import TEXT_CONFIG, TOKEN_PATTERN


def normalize_text(text: Any) -> str:
    """
    Coerce arbitrary input to a string capped at the configured length.

    Bytes are decoded as UTF-8 with replacement characters, None becomes "",
    anything else goes through str(). Never raises.
    """
    if text is None:
        return ""
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("utf-8", errors="replace")
    elif not isinstance(text, str):
        text = str(text)
    return text[: TEXT_CONFIG["max_content_chars"]]


class TokenStream:
    """
    Lazy, restartable sequence of lowercase word tokens.

    Each call to iter() rescans the text, so the same stream can feed both
    the keyword extractor and the embedding generator.
    """

    def __init__(self, text: Any, min_length: int = None):
        self.text = normalize_text(text)
        self.min_length = TEXT_CONFIG["min_token_length"] if min_length is None else min_length

    def __iter__(self) -> Iterator[str]:
        for match in TOKEN_PATTERN.finditer(self.text):
            token = match.group(0)
            if len(token) >= self.min_length:
                yield token.lower()

    def __repr__(self) -> str:
        return f"TokenStream({len(self.text)} chars)"


def tokenize(text: Any) -> TokenStream:
    """
    Tokenize text into lowercase words of length > 2.

    Args:
        text: Text to tokenize (str, bytes or anything str() accepts)

    Returns:
        A restartable TokenStream
    """
    return TokenStream(text)
