"""Config module exports."""

from clovergen.config.loader import load_config
from clovergen.config.models import (
    CloverGenConfig,
    LoggingConfig,
    LogOutputConfig,
    ReportConfig,
)

__all__ = [
    "load_config",
    "CloverGenConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "ReportConfig",
]
