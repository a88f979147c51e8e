"""clovergen error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Instrumentation
- 4xxx: Hits log

Filesystem failures while writing a report are not wrapped; the builtin
OSError reaches the caller unchanged.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Instrumentation (3xxx)
    INSTRUMENTATION_NOT_FOUND = 3001
    INSTRUMENTATION_INVALID = 3002

    # Hits log (4xxx)
    HITS_LOG_MALFORMED = 4001


@dataclass(frozen=True, slots=True)
class CloverGenError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'HITS_LOG_MALFORMED')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(CloverGenError):
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


class InstrumentationError(CloverGenError):
    """Errors loading the instrumentation result document."""

    @classmethod
    def not_found(cls, path: str) -> "InstrumentationError":
        return cls(
            code=ErrorCode.INSTRUMENTATION_NOT_FOUND,
            message=f"Instrumentation result not found: {path}",
            details={"path": path},
        )

    @classmethod
    def invalid(cls, path: str, reason: str) -> "InstrumentationError":
        return cls(
            code=ErrorCode.INSTRUMENTATION_INVALID,
            message=f"Invalid instrumentation result at {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class HitsLogError(CloverGenError, ValueError):
    """Hits log contains a line that is not an instruction id."""

    @classmethod
    def malformed(cls, path: str, line_number: int, text: str) -> "HitsLogError":
        return cls(
            code=ErrorCode.HITS_LOG_MALFORMED,
            message=f"Malformed hits log {path}, line {line_number}: {text!r} is not an integer",
            details={"path": path, "line": line_number, "text": text},
        )
