"""
Logging setup for url-parts.

Log records go to stderr through Rich so stdout only ever carries the
rendered URL. The level defaults to WARNING and can be set with
URL_PARTS_LOG_LEVEL or raised to DEBUG with --verbose.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "url_parts"
LOG_LEVEL_ENV = "URL_PARTS_LOG_LEVEL"
DEFAULT_LEVEL = logging.WARNING


def level_from_env() -> int:
    """Read the log level name from the environment, falling back to WARNING."""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else DEFAULT_LEVEL
    return level if isinstance(level, int) else DEFAULT_LEVEL


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure and return the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else level_from_env())

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    console = Console(stderr=True, soft_wrap=True)
    handler = RichHandler(console=console, show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
