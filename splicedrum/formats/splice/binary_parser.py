"""
SPLICE binary file parser.

Parses the binary structure of drum machine pattern (.splice) files.

SPLICE File Structure:
    Offset  Size    Description
    0x00    6       File tag "SPLICE"
    0x06    7       Reserved
    0x0D    1       Remaining byte count (payload length)
    0x0E    11      Hardware version (zero padded)
    0x19    7       Reserved
    0x20    4       Tempo (float32, little-endian)
    0x24    ...     Track records, until the payload is exhausted

Track record:
    0x00    1       Track id
    0x01    3       Reserved
    0x04    1       Name length (n)
    0x05    n       Name
    0x05+n  16      Steps, one byte each
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

from splicedrum.models.track import Track, STEPS_PER_TRACK
from splicedrum.utils.byte_reader import ByteReader
from splicedrum.utils.validation import (
    LENGTH_FIELD_OFFSET,
    PAYLOAD_OFFSET,
    InvalidByteCountError,
    validate_splice,
)

logger = logging.getLogger(__name__)


@dataclass
class SpliceHeader:
    """
    SPLICE file header structure.
    """

    magic: bytes  # "SPLICE" (6 bytes)
    declared_length: int  # Remaining byte count at offset 0x0D
    hw_version: str  # Hardware version, padding stripped
    tempo: float  # BPM
    file_size: int  # Total bytes in the file

    @property
    def trailing_bytes(self) -> int:
        """Bytes present after the declared payload (ignored by the decoder)."""
        return self.file_size - PAYLOAD_OFFSET - self.declared_length

    def is_valid(self) -> bool:
        """Check if header is valid."""
        return self.magic == b"SPLICE" and self.trailing_bytes >= 0


class SpliceParser:
    """
    Parser for SPLICE binary files.

    Example:
        parser = SpliceParser()
        header, tracks = parser.parse_file("pattern_1.splice")
    """

    # Field sizes
    MAGIC_SIZE = 6
    HW_VERSION_SIZE = 11
    TRACK_ID_SIZE = 4  # 1 meaningful byte + 3 reserved

    # File offsets
    OFFSETS = {
        "magic": 0x00,
        "reserved_1": 0x06,
        "length": LENGTH_FIELD_OFFSET,
        "hw_version": PAYLOAD_OFFSET,
        "reserved_2": PAYLOAD_OFFSET + HW_VERSION_SIZE,
        "tempo": 0x20,
        "tracks": 0x24,
    }

    def __init__(self):
        self.data: bytes = b""
        self.payload: bytes = b""
        self.header: Optional[SpliceHeader] = None
        self.tracks: List[Track] = []
        self.track_offsets: List[int] = []  # File offset of each track record

    def parse_file(self, filepath: Union[str, Path]) -> Tuple[SpliceHeader, List[Track]]:
        """
        Parse a SPLICE file.

        Args:
            filepath: Path to .splice file

        Returns:
            Tuple of (header, tracks)
        """
        with open(filepath, "rb") as f:
            data = f.read()

        return self.parse_bytes(data)

    def parse_bytes(self, data: bytes) -> Tuple[SpliceHeader, List[Track]]:
        """
        Parse SPLICE data from bytes.

        Args:
            data: Raw file contents

        Returns:
            Tuple of (header, tracks)

        Raises:
            SpliceError: If the data is not a well-formed SPLICE file
        """
        self.data = bytes(data)
        self.payload = b""
        self.header = None
        self.tracks = []
        self.track_offsets = []

        validate_splice(self.data)

        self.payload = self._extract_payload()
        reader = ByteReader(self.payload, base_offset=PAYLOAD_OFFSET)

        header = self._parse_header(reader)
        tracks, offsets = self._parse_tracks(reader)

        # Only publish results once the whole file decoded
        self.header = header
        self.tracks = tracks
        self.track_offsets = offsets
        return header, tracks

    def _extract_payload(self) -> bytes:
        """Slice out the declared payload, checking it is fully present."""
        declared = self.data[LENGTH_FIELD_OFFSET]
        actual = len(self.data) - PAYLOAD_OFFSET

        if actual < declared:
            raise InvalidByteCountError(
                f"Invalid remaining byte count: header declares {declared} bytes, "
                f"only {actual} present"
            )

        if actual > declared:
            logger.debug("Ignoring %d trailing bytes after payload", actual - declared)

        return self.data[PAYLOAD_OFFSET : PAYLOAD_OFFSET + declared]

    def _parse_header(self, reader: ByteReader) -> SpliceHeader:
        """Parse hardware version and tempo from the start of the payload."""
        raw_version = reader.read(self.HW_VERSION_SIZE, "hardware version")
        hw_version = raw_version.rstrip(b"\x00").decode("utf-8", errors="replace")

        reader.skip(self._payload_offset("tempo") - reader.position)
        tempo = reader.read_f32_le("tempo")

        logger.debug(
            "Header: declared_length=%d hw_version=%r tempo=%r",
            len(self.payload),
            hw_version,
            tempo,
        )

        return SpliceHeader(
            magic=self.data[: self.MAGIC_SIZE],
            declared_length=len(self.payload),
            hw_version=hw_version,
            tempo=tempo,
            file_size=len(self.data),
        )

    def _parse_tracks(self, reader: ByteReader) -> Tuple[List[Track], List[int]]:
        """Decode track records until the payload is exhausted."""
        tracks = []
        offsets = []

        while not reader.at_end:
            offsets.append(PAYLOAD_OFFSET + reader.position)
            track = self._parse_single_track(reader)
            logger.debug("Track %d: id=%d name=%r", len(tracks), track.id, track.name)
            tracks.append(track)

        return tracks, offsets

    def _parse_single_track(self, reader: ByteReader) -> Track:
        """
        Parse one track record at the reader's position.

        Args:
            reader: Cursor over the payload

        Returns:
            Parsed Track
        """
        track_id = reader.read_u8("track id")
        reader.skip(self.TRACK_ID_SIZE - 1, "track id padding")

        name_length = reader.read_u8("track name length")
        name = reader.read(name_length, "track name").decode("utf-8", errors="replace")

        steps = tuple(reader.read(STEPS_PER_TRACK, "track steps"))

        return Track(id=track_id, name=name, steps=steps)

    def _payload_offset(self, field_name: str) -> int:
        return self.OFFSETS[field_name] - PAYLOAD_OFFSET

    def dump_structure(self) -> str:
        """
        Generate a text dump of file structure for debugging.

        Returns:
            Formatted structure description
        """
        lines = ["SPLICE File Structure:"]
        lines.append(f"  File size: {len(self.data)} bytes")

        if self.header:
            lines.append(f"  Header valid: {self.header.is_valid()}")
            lines.append(f"  Declared payload: {self.header.declared_length} bytes")
            lines.append(f"  Trailing bytes: {self.header.trailing_bytes}")
            lines.append(f"  HW version: {self.header.hw_version}")
            lines.append(f"  Tempo: {self.header.tempo}")

        lines.append("")
        lines.append("  Fields:")
        for name, offset in self.OFFSETS.items():
            lines.append(f"    {name:12} @ 0x{offset:02X}")

        if self.tracks:
            lines.append("")
            lines.append("  Tracks:")
            for offset, track in zip(self.track_offsets, self.tracks):
                lines.append(f"    id {track.id:3d} @ 0x{offset:02X}: {track.name}")

        return "\n".join(lines)
