"""clovergen clover command - write the Clover XML report."""

from __future__ import annotations

from pathlib import Path

import click

from clovergen.cli.utils import load_settings, open_instrumentation, resolve
from clovergen.core.errors import CloverGenError
from clovergen.report import generate_clover_report


@click.command()
@click.option(
    "--workdir",
    default=".",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory holding .clovergen/config.yaml; relative paths resolve here.",
)
@click.option("--coverage-json", "instrumentation_file", default=None, help="Instrumentation result")
@click.option("--hits", "hits_file", default=None, help="Hits log (overrides the result's HitsFile)")
@click.option("--output", default=None, help="Report destination")
@click.option("--threshold", type=click.FloatRange(0, 100), default=None, help="Minimum coverage %")
@click.pass_context
def clover_command(
    ctx: click.Context,
    workdir: Path,
    instrumentation_file: str | None,
    hits_file: str | None,
    output: str | None,
    threshold: float | None,
) -> None:
    """Write a Clover XML coverage report.

    Exits with status 1 when statement coverage is below the threshold.
    """
    workdir = workdir.resolve()
    config = load_settings(
        ctx,
        workdir,
        {
            "instrumentation_file": instrumentation_file,
            "hits_file": hits_file,
            "output": output,
            "threshold": threshold,
        },
    )
    settings = config.report

    result = open_instrumentation(resolve(workdir, settings.instrumentation_file))
    try:
        outcome = generate_clover_report(
            result,
            resolve(workdir, settings.output),
            settings.threshold,
            hits_file=resolve(workdir, settings.hits_file) if settings.hits_file else None,
        )
    except CloverGenError as e:
        raise click.ClickException(str(e)) from e
    except OSError as e:
        raise click.ClickException(f"Cannot write report: {e}") from e

    verdict = outcome.threshold
    click.echo(
        f"Clover report written to {outcome.output} "
        f"({verdict.percent:.2f}% statement coverage)"
    )
    if not verdict.passed:
        click.echo(
            f"Coverage {verdict.percent:.2f}% is below threshold {verdict.threshold:.2f}%",
            err=True,
        )
        raise SystemExit(1)
