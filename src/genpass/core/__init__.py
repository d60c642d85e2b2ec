"""Core GenPass utilities.

This module exports configuration, logging and the exception hierarchy.
"""

from genpass.core.config import Settings, get_settings
from genpass.core.exceptions import (
    CryptoUnavailableError,
    EmailDeliveryError,
    GenPassError,
    InvalidArgumentError,
    RandomSourceUnavailableError,
)
from genpass.core.logging import (
    LoggingContext,
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "LoggingContext",
    "bind_correlation_id",
    "clear_context",
    "GenPassError",
    "InvalidArgumentError",
    "CryptoUnavailableError",
    "RandomSourceUnavailableError",
    "EmailDeliveryError",
]
