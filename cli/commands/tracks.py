"""
Tracks command - detailed track information display.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.markup import escape
from rich import box

from splicedrum.models.track import Track, STEPS_PER_TRACK
from cli.display.formatters import density_bar, step_grid
from cli.display.tables import display_tracks_table
from cli.loader import load_pattern

console = Console()
app = typer.Typer()


def display_track_detail(index: int, track: Track, offset: int, name_length: int) -> None:
    """Display detailed info for a single track."""
    header = f"[bold]{escape(track.name) or '(unnamed)'}[/bold]  id {track.id}"
    console.print(Panel(header, title=f"Track {index}", border_style="cyan", expand=False))

    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Parameter", style="cyan", width=14)
    table.add_column("Value", width=50)

    table.add_row("Record Offset", f"0x{offset:02X}")
    table.add_row("Name Length", str(name_length))
    table.add_row("Steps", step_grid(track.steps))
    table.add_row("Raw", " ".join(f"{v:02X}" for v in track.steps))
    table.add_row("Active", ", ".join(str(i + 1) for i in track.active_steps) or "none")
    table.add_row("Density", density_bar(len(track.active_steps), STEPS_PER_TRACK))

    odd = [v for v in track.steps if v not in (0, 1)]
    if odd:
        table.add_row("Odd Values", Text(", ".join(str(v) for v in odd), style="yellow"))

    console.print(table)


@app.command()
def tracks(
    file: Path = typer.Argument(..., help="SPLICE file to analyze"),
    track_id: Optional[int] = typer.Option(
        None, "--id", "-i", help="Show only tracks with this id"
    ),
    summary: bool = typer.Option(False, "--summary", "-s", help="Show summary table only"),
) -> None:
    """
    Display detailed track information.

    Shows for each track:
    - Id and instrument name
    - Offset of the record in the file
    - Step grid, raw step bytes and active steps

    Examples:

        splicedrum tracks pattern_1.splice

        splicedrum tracks pattern_1.splice --id 3

        splicedrum tracks pattern_1.splice --summary
    """
    _, parser, pattern = load_pattern(file)

    console.print(
        Panel(
            f"[bold]File:[/bold] {escape(str(file))}\n"
            f"[bold]HW Version:[/bold] {escape(pattern.hw_version)}",
            title="[bold]Track Information[/bold]",
            border_style="blue",
        )
    )
    console.print()

    if not pattern.tracks:
        console.print("[yellow]No track data found in file.[/yellow]")
        return

    if summary:
        display_tracks_table(pattern)
        return

    selected = [
        (i, t, offset)
        for i, (t, offset) in enumerate(zip(pattern.tracks, parser.track_offsets))
        if track_id is None or t.id == track_id
    ]

    if not selected:
        console.print(f"[red]No track with id {track_id}.[/red]")
        raise typer.Exit(1)

    for index, t, offset in selected:
        # Name length byte follows the 4-byte id field
        display_track_detail(index, t, offset, parser.data[offset + 4])


if __name__ == "__main__":
    app()
