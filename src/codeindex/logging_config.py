"""
Global loguru setup for the library and the CLI.

Console output goes to stderr unless CODEINDEX_MACHINE_MODE is set. A
rotating file sink under CODEINDEX_LOG_DIR is added only when
CODEINDEX_FILE_LOGGING is set.
"""

import os
import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
LOG_FILE_NAME = "codeindex.log"

_configured = False


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes")


def setup_logging(level="INFO", suppress_console=None, enable_file_logging=None, force=False):
    """
    Replace loguru's handlers with the codeindex sinks.

    Args:
        level: Console level
        suppress_console: Drop the stderr sink; defaults to CODEINDEX_MACHINE_MODE
        enable_file_logging: Add the file sink; defaults to CODEINDEX_FILE_LOGGING
        force: Reconfigure even after a previous call (the CLI and tests do this)
    """
    global _configured
    if _configured and not force:
        return
    _configured = True

    if suppress_console is None:
        suppress_console = _env_flag("CODEINDEX_MACHINE_MODE")
    if enable_file_logging is None:
        enable_file_logging = _env_flag("CODEINDEX_FILE_LOGGING")

    logger.remove()

    if not suppress_console:
        logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)

    if enable_file_logging:
        log_dir = Path(os.getenv("CODEINDEX_LOG_DIR", ".codeindex/logs"))
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / LOG_FILE_NAME,
            level="DEBUG",
            rotation="10 MB",
            retention="1 day",
            compression="gz",
            catch=True,
        )


setup_logging()
