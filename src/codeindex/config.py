"""
Environment overrides for codeindex settings.

Each subpackage keeps its defaults in its own config module; this module
only resolves values that may be overridden from the environment.
"""

import os
from typing import Optional

from codeindex.exceptions import ConfigError

ENV_PREFIX = "CODEINDEX_"


def get_int_env(name: str, default: int, minimum: Optional[int] = None) -> int:
    """
    Read an integer setting from the environment.

    Args:
        name: Setting name without the CODEINDEX_ prefix (e.g. "DIMENSION")
        default: Value used when the variable is unset or empty
        minimum: Smallest accepted value, if any

    Returns:
        The resolved integer

    Raises:
        ConfigError: If the variable is set but is not a valid integer
    """
    env_name = f"{ENV_PREFIX}{name}"
    raw = os.getenv(env_name, "").strip()
    if not raw:
        return default

    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{env_name} must be an integer, got '{raw}'")

    if minimum is not None and value < minimum:
        raise ConfigError(f"{env_name} must be >= {minimum}, got {value}")
    return value
