"""
SPLICE file reader.

Reads .splice binary files and converts them to the Pattern model.
"""

import logging
from pathlib import Path
from typing import Union

from splicedrum.models.pattern import Pattern
from splicedrum.formats.splice.binary_parser import SpliceParser
from splicedrum.utils.validation import (
    LENGTH_FIELD_OFFSET,
    PAYLOAD_OFFSET,
    SPLICE_MAGIC,
    is_splice,
)

logger = logging.getLogger(__name__)


class SpliceReader:
    """
    Reader for SPLICE drum pattern files.

    Parses .splice binary files and constructs Pattern objects.

    Example:
        pattern = SpliceReader.read("pattern_1.splice")
        print(f"Tempo: {pattern.tempo}, tracks: {len(pattern.tracks)}")
    """

    def __init__(self):
        self.parser = SpliceParser()

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> Pattern:
        """
        Read a SPLICE file and return a Pattern.

        Args:
            filepath: Path to .splice file

        Returns:
            Parsed Pattern object
        """
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> Pattern:
        """
        Parse a SPLICE file.

        OS errors from opening or reading the file propagate unchanged.

        Args:
            filepath: Path to .splice file

        Returns:
            Parsed Pattern object
        """
        filepath = Path(filepath)
        logger.debug("Reading %s", filepath)

        data = filepath.read_bytes()

        return self.parse_bytes(data)

    def parse_bytes(self, data: bytes) -> Pattern:
        """
        Parse SPLICE data from bytes.

        Args:
            data: Raw file contents

        Returns:
            Parsed Pattern object
        """
        header, tracks = self.parser.parse_bytes(data)

        return Pattern(hw_version=header.hw_version, tempo=header.tempo, tracks=tuple(tracks))

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file can be read as SPLICE.

        Args:
            filepath: Path to check

        Returns:
            True if file has a valid SPLICE header
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            return False

        try:
            with open(filepath, "rb") as f:
                header = f.read(PAYLOAD_OFFSET)
        except OSError:
            return False

        return is_splice(header)

    @classmethod
    def get_file_info(cls, filepath: Union[str, Path]) -> dict:
        """
        Get basic information about a SPLICE file without full parsing.

        Args:
            filepath: Path to .splice file

        Returns:
            Dictionary with file info
        """
        filepath = Path(filepath)
        data = filepath.read_bytes()

        info = {
            "valid": False,
            "size": len(data),
        }

        if len(data) >= len(SPLICE_MAGIC):
            info["header"] = data[: len(SPLICE_MAGIC)].decode("ascii", errors="replace")

        if len(data) >= PAYLOAD_OFFSET:
            declared = data[LENGTH_FIELD_OFFSET]
            info["declared_length"] = declared
            info["available_length"] = len(data) - PAYLOAD_OFFSET
            info["valid"] = is_splice(data) and info["available_length"] >= declared

        if len(data) >= PAYLOAD_OFFSET + SpliceParser.HW_VERSION_SIZE:
            raw = data[PAYLOAD_OFFSET : PAYLOAD_OFFSET + SpliceParser.HW_VERSION_SIZE]
            info["hw_version"] = raw.rstrip(b"\x00").decode("utf-8", errors="replace")

        return info


def decode(data: bytes) -> Pattern:
    """
    Decode SPLICE bytes into a Pattern.

    Args:
        data: Complete file contents

    Returns:
        Decoded Pattern
    """
    return SpliceReader().parse_bytes(data)


def decode_file(filepath: Union[str, Path]) -> Pattern:
    """
    Decode the SPLICE file at filepath.

    Args:
        filepath: Path to .splice file

    Returns:
        Decoded Pattern
    """
    return SpliceReader.read(filepath)
