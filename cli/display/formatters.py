"""
Display formatting utilities for CLI output.

Provides step grids and density bars.
"""

from typing import Sequence

from rich.text import Text


def step_grid(
    steps: Sequence[int],
    on_char: str = "■",
    off_char: str = "·",
    group_size: int = 4,
) -> Text:
    """
    Create a coloured step grid for a track.

    Steps with value 1 are on; any other non-zero value is shown as an
    odd value so stray bytes stand out.

    Returns:
        Rich Text like "■···│■···│■···│■···"
    """
    text = Text()
    for i, value in enumerate(steps):
        if i and i % group_size == 0:
            text.append("│", style="dim")
        if value == 1:
            text.append(on_char, style="bold green")
        elif value == 0:
            text.append(off_char, style="dim")
        else:
            text.append("?", style="bold yellow")
    return text


def density_bar(
    used: int,
    total: int,
    width: int = 16,
    filled_char: str = "█",
    empty_char: str = "░",
) -> str:
    """
    Create a density/usage bar with percentage.

    Returns:
        Formatted string like "[████░░░░░░░░░░░░]  25% (4/16)"
    """
    if total <= 0:
        return f"[{empty_char * width}]   0% (0/0)"

    fill_count = int((used / total) * width)
    bar = filled_char * fill_count + empty_char * (width - fill_count)
    percent = int((used / total) * 100)

    return f"[{bar}] {percent:3d}% ({used}/{total})"
