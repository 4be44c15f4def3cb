"""
Structured logging for funcspec.

The library itself only ever calls ``get_logger(__name__)``; it never
configures logging on import.  Applications (or tests) call
``configure_logging()`` once to choose level and renderer.  Substitutions
made by the resolution pipeline are logged at DEBUG with the function name,
argument index and type tags, so turning on DEBUG shows every argument
funcspec replaced.

Configuration falls back to ``FuncSpecSettings`` (``FUNCSPEC_LOG_LEVEL``,
``FUNCSPEC_LOG_FORMAT``) when arguments are omitted.

Examples:
    >>> from funcspec.core.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_format=True)
    >>> logger = get_logger(__name__)
    >>> logger.debug("argument_substituted", function="add", index=0)

Tags:
    logging, structlog, observability, funcspec

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

_SERVICE_NAME = "funcspec"

# Track if logging has been configured
_configured = False


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add library metadata to all logs."""
    event_dict.setdefault("service.name", _SERVICE_NAME)
    return event_dict


def configure_logging(
    level: str | None = None,
    json_format: bool | None = None,
    add_timestamp: bool = True,
    force: bool = False,
) -> None:
    """Configure structured logging.

    Subsequent calls are no-ops unless ``force=True``.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR); defaults to settings
        json_format: True for JSON, False for console, None to use settings
        add_timestamp: Include ISO timestamp in logs
        force: Reconfigure even if already configured
    """
    global _configured

    if _configured and not force:
        return

    from funcspec.core.settings import get_settings

    settings = get_settings()
    log_level = (level or settings.log_level).upper()
    if json_format is None:
        json_format = settings.log_format == "json"

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        _add_service_metadata,
    ]

    if add_timestamp:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso", utc=True))

    if json_format:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.getLogger("funcspec").setLevel(getattr(logging, log_level))

    _configured = True


def is_configured() -> bool:
    """Check if logging has been configured."""
    return _configured


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger.

    Args:
        name: Logger name (usually __name__)
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context to include in all subsequent logs.

    Example:
        bind_context(request_id="abc123")
        logger.debug("argument_substituted")  # Includes request_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove specific keys from logging context."""
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all bound context."""
    structlog.contextvars.clear_contextvars()


class LogContext:
    """Context manager for scoped logging context.

    Example:
        with LogContext(caller="billing"):
            charge(amount="12")
        # Context cleared here
    """

    def __init__(self, **kwargs: Any):
        self._context = kwargs

    def __enter__(self) -> LogContext:
        bind_context(**self._context)
        return self

    def __exit__(self, *args) -> None:
        unbind_context(*self._context.keys())


__all__ = [
    "configure_logging",
    "get_logger",
    "is_configured",
    "bind_context",
    "unbind_context",
    "clear_context",
    "LogContext",
]
