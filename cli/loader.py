"""
Shared file loading for CLI commands.

Turns I/O and decode errors into a red message and exit code 1.
"""

import logging
from pathlib import Path
from typing import Tuple

import typer
from rich.console import Console
from rich.markup import escape

from splicedrum.formats.splice.binary_parser import SpliceParser
from splicedrum.models.pattern import Pattern
from splicedrum.utils.validation import SpliceError

console = Console()
logger = logging.getLogger(__name__)


def read_file(file: Path) -> bytes:
    """Read a file, exiting with an error message if it cannot be read."""
    try:
        return file.read_bytes()
    except FileNotFoundError:
        console.print(f"[red]Error: File not found: {escape(str(file))}[/red]", soft_wrap=True)
        raise typer.Exit(1)
    except OSError as e:
        console.print(
            f"[red]Error: Cannot read {escape(str(file))}: {escape(str(e))}[/red]", soft_wrap=True
        )
        raise typer.Exit(1)


def load_pattern(file: Path) -> Tuple[bytes, SpliceParser, Pattern]:
    """
    Read and decode a SPLICE file for display.

    Args:
        file: Path to .splice file

    Returns:
        Tuple of (raw data, parser holding the parsed layout, pattern)
    """
    data = read_file(file)

    parser = SpliceParser()
    try:
        header, tracks = parser.parse_bytes(data)
    except SpliceError as e:
        logger.debug("Decode failed for %s: %s", file, e.kind)
        console.print(f"[red]Error: {escape(str(file))}: {escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    pattern = Pattern(hw_version=header.hw_version, tempo=header.tempo, tracks=tracks)
    return data, parser, pattern
