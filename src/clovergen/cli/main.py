"""clovergen CLI - clovergen command."""

import click

from clovergen.cli.clover import clover_command
from clovergen.cli.summary import summary_command
from clovergen.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="clovergen")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """clovergen - Clover coverage reports from instrumentation results."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "INFO")


cli.add_command(clover_command, name="clover")
cli.add_command(summary_command, name="summary")


if __name__ == "__main__":
    cli()
