"""clovergen summary command - print project metrics without writing a report."""

from __future__ import annotations

import json
from pathlib import Path

import click

from clovergen.cli.utils import load_settings, open_instrumentation, resolve
from clovergen.core.errors import CloverGenError
from clovergen.report import count_project_metrics, coverage_percent, load_hits


@click.command()
@click.option(
    "--workdir",
    default=".",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory holding .clovergen/config.yaml; relative paths resolve here.",
)
@click.option("--coverage-json", "instrumentation_file", default=None, help="Instrumentation result")
@click.option("--hits", "hits_file", default=None, help="Hits log (overrides the result's HitsFile)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def summary_command(
    ctx: click.Context,
    workdir: Path,
    instrumentation_file: str | None,
    hits_file: str | None,
    as_json: bool,
) -> None:
    """Show project-level coverage metrics."""
    workdir = workdir.resolve()
    config = load_settings(
        ctx,
        workdir,
        {"instrumentation_file": instrumentation_file, "hits_file": hits_file},
    )
    settings = config.report

    result = open_instrumentation(resolve(workdir, settings.instrumentation_file))
    if settings.hits_file:
        hits_path: Path | None = resolve(workdir, settings.hits_file)
    else:
        hits_path = Path(result.hits_file) if result.hits_file else None

    try:
        hits = load_hits(hits_path)
    except CloverGenError as e:
        raise click.ClickException(str(e)) from e

    metrics = count_project_metrics(result, hits)
    data = {
        "project": result.source_path,
        "packages": metrics.packages,
        "files": metrics.files,
        "statements": metrics.statements,
        "covered_statements": metrics.covered_statements,
        "methods": metrics.methods,
        "covered_methods": metrics.covered_methods,
        "coverage_percent": round(coverage_percent(metrics), 2),
    }

    if as_json:
        click.echo(json.dumps(data))
        return

    click.echo(f"Project: {data['project']}")
    click.echo(f"Packages: {metrics.packages}  Files: {metrics.files}")
    click.echo(f"Statements: {metrics.covered_statements}/{metrics.statements}")
    click.echo(f"Methods: {metrics.covered_methods}/{metrics.methods}")
    click.echo(f"Coverage: {data['coverage_percent']:.2f}%")
