"""Structured logging using structlog.

Every event is rendered as one JSON object on stderr with an ISO-8601
timestamp, level and logger name. Request-scoped fields such as the request
id are attached by binding them onto a logger and passing that logger down,
never through thread-local state.

Entry points (the API lifespan, the CLI) call configure_logging() once at
startup; importing this module has no side effects.

Usage:
    >>> from core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("records_parsed", record_count=4)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from core.config import LOG_LEVEL

_configured = False


def _get_log_level() -> int:
    """Map the LOG_LEVEL setting to a stdlib level, defaulting to INFO."""
    level = getattr(logging, LOG_LEVEL, None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """Configure stdlib logging and structlog for JSON output.

    Safe to call more than once; only the first call installs handlers.
    """
    global _configured
    if _configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(_get_log_level())

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(default=str),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    _configured = True


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger for the given module name."""
    return structlog.get_logger(name)


def bind_context(logger: Any = None, **kwargs: Any) -> Any:
    """Return a logger with the given context fields bound.

    Example:
        >>> log = bind_context(request_id="3f2a...", file_name="data.csv")
        >>> log.info("processing_file")
    """
    base = logger if logger is not None else structlog.get_logger()
    return base.bind(**kwargs)
