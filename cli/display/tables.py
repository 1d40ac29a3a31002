"""
Rich table displays for pattern information.
"""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from splicedrum.formats.splice.binary_parser import SpliceHeader
from splicedrum.models.pattern import Pattern
from splicedrum.models.track import STEPS_PER_TRACK
from splicedrum.render import format_tempo
from cli.display.formatters import density_bar, step_grid

console = Console()


def display_pattern_info(pattern: Pattern, header: SpliceHeader, filepath: str) -> None:
    """Display pattern header information in a panel."""
    status = "[green]Valid[/green]" if header.is_valid() else "[red]Invalid[/red]"

    content = f"""[bold]File:[/bold] {escape(filepath)}
[bold]HW Version:[/bold] {escape(pattern.hw_version) or "N/A"}
[bold]Tempo:[/bold] {format_tempo(pattern.tempo)} BPM
[bold]Tracks:[/bold] {len(pattern.tracks)}
[bold]Status:[/bold] {status}
[bold]File Size:[/bold] {header.file_size} bytes
[bold]Payload:[/bold] {header.declared_length} bytes
[bold]Trailing Bytes:[/bold] {header.trailing_bytes}"""

    console.print(
        Panel(
            content,
            title="[bold blue]SPLICE Pattern Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )


def display_tracks_table(pattern: Pattern) -> None:
    """Display a table of all tracks with their step grids."""
    table = Table(title="Tracks", box=box.ROUNDED, show_header=True, header_style="bold green")
    table.add_column("#", style="dim", width=3)
    table.add_column("ID", justify="right", width=5)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Steps", no_wrap=True)
    table.add_column("Density", no_wrap=True)

    for i, track in enumerate(pattern.tracks):
        table.add_row(
            str(i),
            str(track.id),
            Text(track.name),
            step_grid(track.steps),
            density_bar(len(track.active_steps), STEPS_PER_TRACK, width=8),
        )

    console.print(table)
