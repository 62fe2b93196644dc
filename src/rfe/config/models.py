"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (RFE__SECTION__KEY)
3. Global YAML (~/.config/rfe/config.yaml)
4. Built-in defaults (this file)

Examples:
    RFE__LOGGING__LEVEL=DEBUG
    RFE__SOURCES__TEMP_PREFIX=scaffold-
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from rfe.config.constants import DEFAULT_GIT_HOSTS, DEFAULT_TEMP_PREFIX

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        RFE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG shows classification and clone details.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class SourcesConfig(BaseModel):
    """Source resolution configuration.

    Env vars:
        RFE__SOURCES__ALLOWED_HOSTS: JSON list of git hosts accepted for remote URLs
        RFE__SOURCES__TEMP_PREFIX: Prefix for temporary clone directories
    """

    allowed_hosts: list[str] = Field(
        default_factory=lambda: list(DEFAULT_GIT_HOSTS),
        description="Hosts whose https URLs are treated as git repositories.",
    )
    temp_prefix: str = Field(
        default=DEFAULT_TEMP_PREFIX,
        description="Prefix for temporary clone directories.",
    )

    @field_validator("allowed_hosts")
    @classmethod
    def normalize_hosts(cls, v: list[str]) -> list[str]:
        hosts = [h.strip().lower() for h in v if h.strip()]
        if not hosts:
            raise ValueError("At least one git host must be allowed")
        return hosts


class RfeConfig(BaseModel):
    """Root configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    sources: SourcesConfig = Field(default_factory=SourcesConfig)
