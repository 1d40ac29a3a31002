"""
CLI display modules.
"""

from cli.display.tables import (
    display_pattern_info,
    display_tracks_table,
)
from cli.display.hex_view import display_hex_dump

__all__ = [
    "display_pattern_info",
    "display_tracks_table",
    "display_hex_dump",
]
