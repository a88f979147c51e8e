"""Core module exports."""

from clovergen.core.errors import (
    CloverGenError,
    ConfigError,
    ErrorCode,
    HitsLogError,
    InstrumentationError,
)
from clovergen.core.logging import (
    clear_run_id,
    configure_logging,
    get_run_id,
    set_run_id,
)

__all__ = [
    # Errors
    "CloverGenError",
    "ConfigError",
    "ErrorCode",
    "HitsLogError",
    "InstrumentationError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_run_id",
    "set_run_id",
]
