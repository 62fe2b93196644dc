"""Config module exports."""

from rfe.config.loader import load_config
from rfe.config.models import (
    LoggingConfig,
    LogOutputConfig,
    RfeConfig,
    SourcesConfig,
)

__all__ = [
    "load_config",
    "LoggingConfig",
    "LogOutputConfig",
    "RfeConfig",
    "SourcesConfig",
]
