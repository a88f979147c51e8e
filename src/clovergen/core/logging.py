"""Structured logging for report runs.

structlog renders through stdlib handlers, one per configured output, each
with its own level and JSON or console format. Every event carries the
emitting module (``logger``) and the id of the report run in progress
(``run_id``), so interleaved runs in one log file can be told apart.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from clovergen.config.models import LoggingConfig, LogOutputConfig

_run_id: ContextVar[str | None] = ContextVar("run_id", default=None)


def get_run_id() -> str | None:
    return _run_id.get()


def set_run_id(run_id: str | None = None) -> str:
    """Start a report run, generating an id when none is given."""
    rid = run_id or uuid4().hex[:12]
    _run_id.set(rid)
    return rid


def clear_run_id() -> None:
    _run_id.set(None)


def _add_run_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if rid := get_run_id():
        event_dict["run_id"] = rid
    return event_dict


_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
    _add_run_id,  # type: ignore[list-item]
]


def _level(name: str) -> int:
    return logging.getLevelNamesMapping().get(name.upper(), logging.INFO)


def _stream(destination: str) -> TextIO | None:
    return {"stderr": sys.stderr, "stdout": sys.stdout}.get(destination)


def _handler(output: LogOutputConfig) -> logging.Handler:
    stream = _stream(output.destination)
    if stream is not None:
        return logging.StreamHandler(stream)
    path = Path(output.destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a", encoding="utf-8")


def _formatter(output: LogOutputConfig) -> structlog.stdlib.ProcessorFormatter:
    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        stream = _stream(output.destination)
        renderer = structlog.dev.ConsoleRenderer(
            colors=stream is not None and stream.isatty(),
            pad_event_to=0,
            pad_level=False,
        )
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_SHARED_PROCESSORS,
    )


def configure_logging(config: LoggingConfig | None = None, *, level: str = "INFO") -> None:
    """Route structlog events to the outputs in ``config``.

    Without a config, logs go to stderr in console format at ``level``.
    Calling again replaces the previous handlers.
    """
    from clovergen.config.models import LoggingConfig

    if config is None:
        config = LoggingConfig(level=level)
    default_level = _level(config.level)

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(default_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Reconfiguration must reach module-level loggers
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    for old in root_logger.handlers[:]:
        root_logger.removeHandler(old)
        old.close()
    root_logger.setLevel(default_level)

    for output in config.outputs:
        handler = _handler(output)
        handler.setLevel(_level(output.level or config.level))
        handler.setFormatter(_formatter(output))
        root_logger.addHandler(handler)
