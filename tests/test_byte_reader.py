"""Tests for the bounds-checked byte reader."""

import struct

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from splicedrum.utils.byte_reader import ByteReader
from splicedrum.utils.validation import ErrorKind, TruncatedError


class TestByteReader:
    """Test cases for ByteReader."""

    def test_sequential_reads(self):
        """Test that reads advance the cursor in order."""
        reader = ByteReader(b"\x05abc\x01\x02")

        assert reader.read_u8() == 5
        assert reader.read(3) == b"abc"
        assert reader.position == 4
        assert reader.remaining == 2
        assert not reader.at_end

    def test_read_f32_le(self):
        """Test little-endian float decoding."""
        reader = ByteReader(struct.pack("<f", 98.4))

        assert reader.read_f32_le() == pytest.approx(98.4, abs=1e-5)
        assert reader.at_end

    def test_skip(self):
        """Test skipping reserved bytes."""
        reader = ByteReader(b"\x00\x00\x00\x07")
        reader.skip(3)

        assert reader.read_u8() == 7

    def test_read_past_end(self):
        """Test that an over-long read raises and leaves the cursor alone."""
        reader = ByteReader(b"\x01\x02")
        reader.read_u8()

        with pytest.raises(TruncatedError) as exc_info:
            reader.read(4, "track steps")

        assert exc_info.value.kind == ErrorKind.TRUNCATED
        assert "track steps" in str(exc_info.value)
        assert reader.position == 1

    def test_error_reports_file_offset(self):
        """Test that base_offset shifts offsets in error messages."""
        reader = ByteReader(b"", base_offset=0x0E)

        with pytest.raises(TruncatedError, match="0x0E"):
            reader.read_u8()

    def test_empty_read(self):
        """Test that a zero-length read succeeds at the end."""
        reader = ByteReader(b"")

        assert reader.read(0) == b""
        assert reader.at_end

    def test_negative_count(self):
        """Test that negative counts are rejected."""
        reader = ByteReader(b"abc")

        with pytest.raises(ValueError):
            reader.read(-1)

    def test_len(self):
        """Test that len reports the buffer size."""
        assert len(ByteReader(bytes(22))) == 22
