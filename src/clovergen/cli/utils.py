"""CLI utilities."""

from pathlib import Path
from typing import Any

import click

from clovergen.config import CloverGenConfig, load_config
from clovergen.core.errors import CloverGenError
from clovergen.core.logging import configure_logging
from clovergen.instrumentation import InstrumentationResult, load_instrumentation


def load_settings(ctx: click.Context, workdir: Path, report: dict[str, Any]) -> CloverGenConfig:
    """Load config for ``workdir`` with CLI options layered on top.

    Options left unset on the command line (None) do not override config.
    Logging is reconfigured from the loaded config; ``--verbose`` forces DEBUG.

    Raises:
        click.ClickException: If the config is invalid.
    """
    overrides = {key: value for key, value in report.items() if value is not None}
    try:
        config = load_config(workdir, **({"report": overrides} if overrides else {}))
    except CloverGenError as e:
        raise click.ClickException(str(e)) from e

    logging_config = config.logging
    if ctx.find_root().obj and ctx.find_root().obj.get("verbose"):
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=logging_config)
    return config


def resolve(workdir: Path, value: str) -> Path:
    """Resolve a configured path against the working directory."""
    path = Path(value).expanduser()
    return path if path.is_absolute() else workdir / path


def open_instrumentation(path: Path) -> InstrumentationResult:
    try:
        return load_instrumentation(path)
    except CloverGenError as e:
        raise click.ClickException(str(e)) from e
