"""
Logging configuration for interviewer.

Prompts and acquired values go to stdout, so log records are written to
stderr by default and never interleave with what the user is answering.
The library never configures logging on import; applications (and the CLI)
call ``setup_logging`` once.
"""

import logging
import sys
from typing import Final, TextIO

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
DEFAULT_LEVEL: Final[int] = logging.INFO
QUIET_LEVEL: Final[int] = logging.WARNING
ROOT_LOGGER_NAME: Final[str] = "interviewer"


def level_for(verbose: bool) -> int:
    """DEBUG shows every discarded line and retry; otherwise only warnings."""
    return logging.DEBUG if verbose else QUIET_LEVEL


def setup_logging(level: int = DEFAULT_LEVEL, *, stream: TextIO | None = None) -> logging.Logger:
    """
    Configure logging for the interviewer package.

    Args:
        level: The logging level to use (default: INFO).
        stream: Destination for log records (default: the current stderr).

    Returns:
        The package root logger.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    # Drop handlers from earlier calls so repeated setup never duplicates output
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)
    root_logger.propagate = False
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: The name of the module requesting the logger.

    Returns:
        A logger under the 'interviewer' namespace.
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
