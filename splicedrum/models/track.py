"""
Track data model for SPLICE patterns.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

STEPS_PER_TRACK = 16


@dataclass(frozen=True)
class Track:
    """
    A single instrument voice with a 16-step sequence.

    Attributes:
        id: Track identifier (0-255), not necessarily unique or sorted
        name: Instrument name as stored in the file
        steps: 16 step values; exactly 1 means the step is on
    """

    id: int
    name: str
    steps: Tuple[int, ...]

    def __post_init__(self):
        steps = tuple(self.steps)
        if len(steps) != STEPS_PER_TRACK:
            raise ValueError(f"Track needs {STEPS_PER_TRACK} steps, got {len(steps)}")
        # Frozen dataclass, so bypass __setattr__ to normalize lists to tuples
        object.__setattr__(self, "steps", steps)

    def is_active(self, index: int) -> bool:
        """Check if the step at index (0-15) is on."""
        return self.steps[index] == 1

    @property
    def active_steps(self) -> Tuple[int, ...]:
        """Indices of steps that are on."""
        return tuple(i for i, value in enumerate(self.steps) if value == 1)

    @classmethod
    def from_pattern_string(cls, id: int, name: str, grid: str) -> "Track":
        """
        Build a track from a grid like "x---|x---|x---|x---".

        Args:
            id: Track id
            name: Instrument name
            grid: 16 step characters, 'x' for on; '|' and spaces are ignored

        Returns:
            New Track
        """
        cells: Sequence[str] = [c for c in grid if c not in "| "]
        return cls(id=id, name=name, steps=tuple(1 if c == "x" else 0 for c in cells))
