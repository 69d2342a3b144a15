"""Core credpolicy utilities.

This module exports settings, logging helpers and the error taxonomy.
"""

from credpolicy.core.config import Settings, get_settings
from credpolicy.core.errors import CredentialError, ErrorKind
from credpolicy.core.logging import (
    LoggingContext,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "CredentialError",
    "ErrorKind",
    "LoggingContext",
    "Settings",
    "clear_context",
    "configure_logging",
    "get_logger",
    "get_settings",
]
