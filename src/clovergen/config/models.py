"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (CLOVERGEN__SECTION__KEY)
3. Project YAML (.clovergen/config.yaml)
4. Global YAML (~/.config/clovergen/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    CLOVERGEN__<SECTION>__<KEY>=<VALUE>

Examples:
    CLOVERGEN__LOGGING__LEVEL=DEBUG
    CLOVERGEN__REPORT__OUTPUT=build/clover.xml
    CLOVERGEN__REPORT__THRESHOLD=75
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

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
        CLOVERGEN__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every aggregation step.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ReportConfig(BaseModel):
    """Clover report generation settings.

    Env vars:
        CLOVERGEN__REPORT__OUTPUT: Destination of the Clover XML report
        CLOVERGEN__REPORT__INSTRUMENTATION_FILE: Instrumentation result JSON
        CLOVERGEN__REPORT__HITS_FILE: Hits log (overrides the result's HitsFile)
        CLOVERGEN__REPORT__THRESHOLD: Minimum statement coverage percentage
    """

    output: str = Field(
        default="coverage.xml",
        description="Report destination. Relative paths resolve against the working directory.",
    )
    instrumentation_file: str = Field(
        default="coverage.json",
        description="Instrumentation result written by the instrumenter.",
    )
    hits_file: str | None = Field(
        default=None,
        description="Hits log. Defaults to the HitsFile recorded in the instrumentation result.",
    )
    threshold: float = Field(
        default=90.0,
        description="Minimum statement coverage (percent). Does not affect report content.",
    )

    @field_validator("threshold")
    @classmethod
    def validate_threshold(cls, v: float) -> float:
        if not (0.0 <= v <= 100.0):
            raise ValueError(f"Threshold must be 0-100, got {v}")
        return v


class CloverGenConfig(BaseModel):
    """Root configuration for clovergen.

    All settings can be configured via:
    1. Environment variables: CLOVERGEN__SECTION__KEY
    2. YAML config files (project or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
