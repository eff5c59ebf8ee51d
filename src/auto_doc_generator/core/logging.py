"""Structured logging for auto-doc-generator.

Log events go to stderr as JSON lines so they never mix with the CLI's
stdout output. ``--log-file`` redirects them to a file that this module
owns: reconfiguring closes the previous file before opening the next one.
"""
import logging
import sys
from typing import Any, List, Optional, TextIO

import structlog

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

_log_file: Optional[TextIO] = None


def _open_log_file(log_file: Optional[str]) -> TextIO:
    """Swap the owned log file for ``log_file`` and return the new sink."""
    global _log_file

    close_log_file()
    if log_file is None:
        return sys.stderr
    _log_file = open(log_file, "a", encoding="utf-8")
    return _log_file


def close_log_file() -> None:
    """Close the file opened for ``--log-file``, if any."""
    global _log_file

    if _log_file is not None:
        _log_file.close()
        _log_file = None


def configure_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configure structlog with JSON output.

    Args:
        log_level: DEBUG, INFO, WARNING or ERROR; anything else means INFO
        log_file: Append events to this file instead of stderr
    """
    level = _LEVELS.get(log_level.upper(), logging.INFO)

    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=_open_log_file(log_file)),
        # Loggers bound before a reconfigure would keep writing to a closed file
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Return a structlog logger named after the calling module or tool."""
    return structlog.get_logger(name)
