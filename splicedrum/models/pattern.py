"""
Pattern data model - the decoded contents of one SPLICE file.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from splicedrum.models.track import Track


@dataclass(frozen=True)
class Pattern:
    """
    Complete drum pattern.

    Attributes:
        hw_version: Hardware version string the pattern was saved with
        tempo: Tempo in BPM (float32 precision)
        tracks: Tracks in the order they appear in the file
    """

    hw_version: str = ""
    tempo: float = 0.0
    tracks: Tuple[Track, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "tracks", tuple(self.tracks))

    def __len__(self) -> int:
        return len(self.tracks)

    def __iter__(self) -> Iterator[Track]:
        return iter(self.tracks)

    def __str__(self) -> str:
        from splicedrum.render import render_pattern

        return render_pattern(self)

    @property
    def track_ids(self) -> List[int]:
        """Track ids in file order."""
        return [track.id for track in self.tracks]

    def get_track(self, track_id: int) -> Optional[Track]:
        """Get the first track with the given id."""
        for track in self.tracks:
            if track.id == track_id:
                return track
        return None

    def __repr__(self) -> str:
        return (
            f"Pattern(hw_version={self.hw_version!r}, tempo={self.tempo!r}, "
            f"tracks={len(self.tracks)})"
        )
