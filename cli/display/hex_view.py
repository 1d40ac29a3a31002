"""
Hex dump display utilities.

Regions are (start, end, name, description, color) tuples covering
[start, end) of the file.
"""

from typing import List, Sequence, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from splicedrum.formats.splice.binary_parser import SpliceParser

console = Console()

Region = Tuple[int, int, str, str, str]

# Fixed header regions
HEADER_REGIONS: List[Region] = [
    (0x00, 0x06, "MAGIC", "File tag 'SPLICE'", "bright_blue"),
    (0x06, 0x0D, "RESERVED_1", "Unused/reserved", "dim"),
    (0x0D, 0x0E, "LENGTH", "Remaining byte count", "cyan"),
    (0x0E, 0x19, "HW_VERSION", "Hardware version (zero padded)", "green"),
    (0x19, 0x20, "RESERVED_2", "Unused/reserved", "dim"),
    (0x20, 0x24, "TEMPO", "Tempo (float32 LE)", "yellow"),
]

TRACK_COLORS = ("magenta", "blue")


def build_regions(parser: SpliceParser) -> List[Region]:
    """
    Build the full region list for a parsed file.

    Args:
        parser: Parser that has successfully parsed a file

    Returns:
        Header regions followed by one region per track record and,
        if present, the trailing bytes
    """
    regions = list(HEADER_REGIONS)
    ends = parser.track_offsets[1:] + [len(parser.data) - parser.header.trailing_bytes]

    for i, (start, end) in enumerate(zip(parser.track_offsets, ends)):
        track = parser.tracks[i]
        regions.append(
            (start, end, f"TRACK_{i}", f"({track.id}) {track.name}", TRACK_COLORS[i % 2])
        )

    if parser.header.trailing_bytes > 0:
        regions.append(
            (ends[-1], len(parser.data), "TRAILING", "Ignored bytes after payload", "red")
        )

    return regions


def get_region_for_offset(regions: Sequence[Region], offset: int) -> Tuple[str, str, str]:
    """Get region name, description, and color for an offset."""
    for start, end, name, desc, color in regions:
        if start <= offset < end:
            return name, desc, color
    return "UNKNOWN", "Unknown region", "white"


def format_hex_line(
    data: bytes, offset: int, regions: Sequence[Region], bytes_per_line: int = 16
) -> Text:
    """
    Format a single line of hex dump, colouring each byte by its region.

    Returns:
        Rich Text with offset, hex bytes and ASCII column
    """
    text = Text()
    text.append(f"0x{offset:04X} ", style="dim")

    for i, byte in enumerate(data):
        _, _, color = get_region_for_offset(regions, offset + i)
        text.append(f"{byte:02X}", style="dim" if byte == 0 else color)
        text.append(" ")

    if len(data) < bytes_per_line:
        text.append("   " * (bytes_per_line - len(data)))

    text.append(" ")
    for byte in data:
        if 32 <= byte < 127:
            text.append(chr(byte), style="green")
        else:
            text.append(".", style="dim")

    return text


def create_legend(regions: Sequence[Region]) -> Table:
    """Create a legend for the hex dump colors."""
    table = Table(title="Legend", box=box.SIMPLE, show_header=False, expand=False)
    table.add_column("Region", width=12)
    table.add_column("Description", width=40)

    for start, end, name, desc, color in regions:
        table.add_row(
            Text(name, style=color),
            Text(f"{desc} ({end - start} bytes, 0x{start:02X}-0x{end - 1:02X})"),
        )

    return table


def display_hex_dump(
    data: bytes,
    regions: Sequence[Region] = HEADER_REGIONS,
    title: str = "Hex Dump",
    start_offset: int = 0,
    bytes_per_line: int = 16,
) -> None:
    """Display a region-coloured hex dump inside a panel."""
    lines = Text()
    for offset in range(0, len(data), bytes_per_line):
        if offset:
            lines.append("\n")
        chunk = data[offset : offset + bytes_per_line]
        lines.append_text(format_hex_line(chunk, start_offset + offset, regions, bytes_per_line))

    console.print(Panel(lines, title=title, border_style="blue", expand=False))
