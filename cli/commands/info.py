"""
Info command - display pattern information.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.display.tables import display_pattern_info, display_tracks_table
from cli.display.hex_view import display_hex_dump, HEADER_REGIONS
from cli.loader import load_pattern

console = Console()
app = typer.Typer()


@app.command()
def info(
    file: Path = typer.Argument(..., help="SPLICE file to analyze"),
    show_hex: bool = typer.Option(False, "--hex", "-x", help="Show header bytes"),
    show_structure: bool = typer.Option(
        False, "--structure", "-s", help="Show parsed field layout"
    ),
) -> None:
    """
    Display pattern information.

    Shows the hardware version, tempo, payload size and a table of
    tracks with their step grids.

    Examples:

        splicedrum info pattern_1.splice

        splicedrum info pattern_1.splice --hex
    """
    data, parser, pattern = load_pattern(file)

    display_pattern_info(pattern, parser.header, str(file))

    if show_hex:
        header_end = HEADER_REGIONS[-1][1]
        display_hex_dump(data[:header_end], title="[bold]Header Bytes[/bold]")

    if show_structure:
        console.print(parser.dump_structure(), markup=False, highlight=False)

    if pattern.tracks:
        display_tracks_table(pattern)
    else:
        console.print("[yellow]No tracks found in file.[/yellow]")


if __name__ == "__main__":
    app()
