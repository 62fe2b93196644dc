"""rfe error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Source resolution and reads
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Source (3xxx)
    SOURCE_UNAVAILABLE = 3001
    FILE_NOT_FOUND = 3002
    IO_FAILURE = 3003

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class RfeError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'FILE_NOT_FOUND')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(RfeError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class SourceError(RfeError):
    """Errors raised while resolving a source or reading files from it."""

    @classmethod
    def unavailable(cls, source: str, reason: str) -> "SourceError":
        return cls(
            code=ErrorCode.SOURCE_UNAVAILABLE,
            message=f"Source unavailable: {source}: {reason}",
            retryable=True,
            details={"source": source, "reason": reason},
        )

    @classmethod
    def file_not_found(cls, filename: str, location: str | None) -> "SourceError":
        where = location if location is not None else "<default templates>"
        return cls(
            code=ErrorCode.FILE_NOT_FOUND,
            message=f"File not found: {filename} (searched {where} and default templates)",
            details={"filename": filename, "location": location},
        )

    @classmethod
    def io_failure(cls, path: str, reason: str) -> "SourceError":
        return cls(
            code=ErrorCode.IO_FAILURE,
            message=f"Failed to read {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class InternalError(RfeError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
