"""
Canonical text rendering of decoded patterns.

Output format:
    Saved with HW Version: 0.808-alpha
    Tempo: 120
    (0) kick	|x---|x---|x---|x---|
"""

import math
import struct
from typing import Sequence

from splicedrum.models.pattern import Pattern
from splicedrum.models.track import Track

STEP_ON = "x"
STEP_OFF = "-"
STEPS_PER_GROUP = 4

# float32 carries at most 9 significant decimal digits
_MAX_FLOAT32_DIGITS = 9

# Decimal exponents printed in fixed notation
_MIN_FIXED_EXPONENT = -4
_MAX_FIXED_EXPONENT = 6


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def format_tempo(value: float) -> str:
    """
    Format a float32 tempo with the fewest digits that read back the same.

    Layout follows the classic %g rules with a shortest mantissa: fixed
    notation while the decimal exponent is in [-4, 6), exponent notation
    with a signed two-digit exponent otherwise. Whole numbers drop the
    decimal point (120.0 -> "120", 1e6 -> "1e+06") and negative zero
    keeps its sign ("-0").

    Args:
        value: Tempo as decoded from the file

    Returns:
        Formatted tempo string
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    target = _to_float32(value)
    digits = _MAX_FLOAT32_DIGITS
    for candidate_digits in range(1, _MAX_FLOAT32_DIGITS + 1):
        if _to_float32(float(f"{target:.{candidate_digits}g}")) == target:
            digits = candidate_digits
            break

    mantissa, exponent = f"{target:.{digits - 1}e}".split("e")
    exponent = int(exponent)

    if exponent < _MIN_FIXED_EXPONENT or exponent >= _MAX_FIXED_EXPONENT:
        sign = "-" if exponent < 0 else "+"
        return f"{mantissa}e{sign}{abs(exponent):02d}"
    return f"{target:.{max(digits - 1 - exponent, 0)}f}"


def format_steps(steps: Sequence[int]) -> str:
    """
    Render step values as a grid like "x---|x---|x---|x---|".

    Args:
        steps: Step values; only exactly 1 counts as on

    Returns:
        Grid string with a bar after every 4 steps
    """
    cells = []
    for i, value in enumerate(steps):
        cells.append(STEP_ON if value == 1 else STEP_OFF)
        if (i + 1) % STEPS_PER_GROUP == 0:
            cells.append("|")
    return "".join(cells)


def format_track(track: Track) -> str:
    """Render a single track line without the trailing newline."""
    return f"({track.id}) {track.name}\t|{format_steps(track.steps)}"


def render_pattern(pattern: Pattern) -> str:
    """
    Render a pattern as canonical text.

    Args:
        pattern: Decoded pattern

    Returns:
        Multi-line text, each line terminated by a newline
    """
    lines = [
        f"Saved with HW Version: {pattern.hw_version}",
        f"Tempo: {format_tempo(pattern.tempo)}",
    ]
    lines.extend(format_track(track) for track in pattern.tracks)
    return "\n".join(lines) + "\n"
