"""
Timing decorator for indexing passes.
"""

import functools
import time
from typing import Any, Callable

from codeindex.logging_config import logger


def trace(func: Callable) -> Callable:
    """Log the wall time of each call, or the time until it raised."""
    name = func.__qualname__

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        start = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(f"{name} failed after {time.perf_counter() - start:.4f}s: {type(e).__name__}: {e}")
            raise
        logger.debug(f"{name} took {time.perf_counter() - start:.4f}s")
        return result

    return wrapper
