"""Structured logging for credpolicy.

This module configures structlog for JSON output in production and
colored console output in development. Candidate secrets must never be
passed to a logger; log error kinds and codes instead.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from credpolicy.core.config import get_settings


SECRET_FIELDS = frozenset(
    {"password", "passphrase", "pin", "secret", "candidate", "token", "key", "hashed"}
)
REDACTED = "***"


def add_logger_name(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add the logger name to the entry unless ``get_logger`` already bound one."""
    event_dict.setdefault("logger", getattr(logger, "name", "credpolicy"))
    return event_dict


def redact_secrets(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Mask values logged under a secret-bearing key.

    Policies never pass candidates to a logger. This catches the case where a
    caller binds one by mistake, e.g. ``logger.info("...", password=value)``.
    """
    for field in SECRET_FIELDS.intersection(event_dict):
        event_dict[field] = REDACTED
    return event_dict


def rename_message_field(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Rename 'event' field to 'message' for compatibility."""
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def configure_logging(settings: Any | None = None) -> None:
    """Configure structured logging.

    Args:
        settings: Optional settings instance. If not provided, will load from environment.
    """
    if settings is None:
        settings = get_settings()

    level = getattr(logging, settings.log_level)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        add_logger_name,
        redact_secrets,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        rename_message_field,
    ]

    if settings.is_development or settings.log_format == "console":
        renderer: Processor = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )
        cache_logger = False
    else:
        renderer = structlog.processors.JSONRenderer()
        cache_logger = True

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        # Logs go to stderr so CLI output on stdout stays machine-readable
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=cache_logger,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Optional logger name. If not provided, uses 'credpolicy'.

    Returns:
        BoundLogger: Configured structured logger instance.
    """
    # PrintLogger has no name of its own, so bind it as context
    return structlog.get_logger(logger=name or "credpolicy")


class LoggingContext:
    """Context manager for adding logging context.

    Example:
        with LoggingContext(policy="password", caller="signup"):
            logger.info("Validating credential")
    """

    def __init__(self, **kwargs: str) -> None:
        self.context = kwargs

    def __enter__(self) -> "LoggingContext":
        structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, *args: Any) -> None:
        structlog.contextvars.unbind_contextvars(*self.context.keys())


def clear_context() -> None:
    """Clear all context variables from the current logging context."""
    structlog.contextvars.clear_contextvars()
