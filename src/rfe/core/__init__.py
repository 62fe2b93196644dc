"""Core module exports."""

from rfe.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    RfeError,
    SourceError,
)
from rfe.core.logging import configure_logging, get_logger
from rfe.core.progress import spinner, status

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "RfeError",
    "SourceError",
    # Logging
    "configure_logging",
    "get_logger",
    # Progress
    "spinner",
    "status",
]
