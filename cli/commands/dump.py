"""
Dump command - annotated hex dump of a SPLICE file.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from splicedrum.formats.splice.binary_parser import SpliceParser
from splicedrum.utils.validation import SpliceError
from cli.display.hex_view import HEADER_REGIONS, build_regions, create_legend, format_hex_line
from cli.loader import read_file

console = Console()
app = typer.Typer()


@app.command()
def dump(
    file: Path = typer.Argument(..., help="SPLICE file to dump"),
    start: int = typer.Option(0, "--start", "-s", help="Start offset"),
    length: int = typer.Option(0, "--length", "-l", help="Number of bytes (0=all)"),
    width: int = typer.Option(16, "--width", "-w", help="Bytes per line"),
    no_legend: bool = typer.Option(False, "--no-legend", help="Hide the legend"),
) -> None:
    """
    Annotated hex dump of a SPLICE pattern file.

    Bytes are coloured by the region they belong to (tag, length,
    hardware version, tempo, each track record). Files that fail to
    decode are still dumped, with only the fixed header annotated.

    Examples:

        splicedrum dump pattern_1.splice

        splicedrum dump pattern_1.splice --start 36 --length 64
    """
    data = read_file(file)

    parser = SpliceParser()
    try:
        parser.parse_bytes(data)
        regions = build_regions(parser)
    except SpliceError as e:
        console.print(f"[yellow]Warning: {escape(str(e))}[/yellow]")
        regions = list(HEADER_REGIONS)

    if start < 0:
        console.print(f"[red]Invalid start offset: {start}[/red]")
        raise typer.Exit(1)

    if width < 1:
        console.print(f"[red]Invalid width: {width}[/red]")
        raise typer.Exit(1)

    if length == 0:
        length = len(data) - start
    end = min(start + length, len(data))

    if not no_legend:
        console.print(create_legend(regions))
        console.print()

    showing = f"0x{start:02X} - 0x{end - 1:02X} ({end - start} bytes)" if end > start else "nothing"
    console.print(
        Panel(
            f"[bold]File:[/bold] {escape(str(file))}\n"
            f"[bold]Size:[/bold] {len(data)} bytes\n"
            f"[bold]Showing:[/bold] {showing}",
            title="[bold]SPLICE Hex Dump[/bold]",
            border_style="blue",
        )
    )
    console.print()

    header = Text()
    header.append("OFFSET ", style="dim")
    header.append(" ".join(f"{i:02X}" for i in range(width)), style="dim")
    header.append("  ASCII", style="dim")
    console.print(header)
    console.print("─" * (7 + width * 3 + 1 + width))

    lines_shown = 0
    for offset in range(start, end, width):
        chunk = data[offset : min(offset + width, end)]
        console.print(format_hex_line(chunk, offset, regions, width))
        lines_shown += 1

    console.print()
    console.print(f"[dim]Total: {lines_shown} lines displayed[/dim]")


if __name__ == "__main__":
    app()
