"""
splicedrum - Decoder for SPLICE drum machine pattern files.

A CLI tool for decoding and inspecting .splice patterns.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from splicedrum import __version__
from cli.commands.decode import decode
from cli.commands.info import info
from cli.commands.tracks import tracks
from cli.commands.validate import validate
from cli.commands.dump import dump

console = Console()

LOG_FORMAT = "%(name)s: %(message)s"

app = typer.Typer(
    name="splicedrum",
    help="Decode and inspect SPLICE drum machine pattern files.",
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="decode")(decode)
app.command(name="info")(info)
app.command(name="tracks")(tracks)
app.command(name="validate")(validate)
app.command(name="dump")(dump)


def configure_logging(level: str, verbose: bool = False) -> None:
    """
    Route library logging through Rich on stderr.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...)
        verbose: Force DEBUG regardless of level
    """
    numeric = logging.DEBUG if verbose else getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        raise typer.BadParameter(f"Unknown log level: {level}", param_hint="--log-level")

    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(numeric)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]splicedrum[/bold] version {__version__}")
    console.print("[dim]Decoder for SPLICE drum machine pattern files[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar="SPLICEDRUM_LOG_LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
) -> None:
    """
    splicedrum - Decode and inspect SPLICE drum patterns.

    [bold]Quick Start:[/bold]

        splicedrum decode pattern.splice    # Canonical text rendering
        splicedrum info pattern.splice      # Header and track overview

    [bold]Analysis Commands:[/bold]

        splicedrum tracks pattern.splice    # Detailed track info
        splicedrum dump pattern.splice      # Annotated hex dump
        splicedrum validate pattern.splice  # Validate file structure

    Use --help with any command for more details.
    """
    if version_flag:
        version()
        raise typer.Exit()

    configure_logging(log_level, verbose)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
