"""
Logging configuration for the application.

One pipe-delimited format for every logger, written to stdout.
Operator diagnostics (e.g. "user not found") go through the same
handlers; they are never part of a response body.
Never logs sensitive data (email addresses, request bodies, secrets).
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers capped at WARNING regardless of the app level.
QUIET_LOGGERS = ("uvicorn.access", "uvicorn.error", "slowapi")


def resolve_level(level: str) -> int:
    """Map a level name to its numeric value, INFO for unknown names."""
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: str = "INFO") -> None:
    """Configure structured logging for the application.

    Safe to call more than once; each call replaces the root handlers.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
