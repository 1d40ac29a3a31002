"""
Decode command - print the canonical text rendering of patterns.
"""

from pathlib import Path
from typing import List

import typer

from splicedrum.render import render_pattern
from cli.loader import load_pattern

app = typer.Typer()


@app.command()
def decode(
    files: List[Path] = typer.Argument(..., help="SPLICE files to decode"),
) -> None:
    """
    Decode SPLICE files and print each pattern as plain text.

    Output is the canonical rendering, suitable for diffing:

        Saved with HW Version: 0.808-alpha
        Tempo: 120
        (0) kick	|x---|x---|x---|x---|

    Examples:

        splicedrum decode pattern_1.splice

        splicedrum decode fixtures/*.splice
    """
    for file in files:
        _, _, pattern = load_pattern(file)
        # Plain echo keeps tabs and brackets intact
        typer.echo(render_pattern(pattern), nl=False)


if __name__ == "__main__":
    app()
