"""
Bounds-checked cursor over a byte buffer.

Every read advances the cursor; a read that would pass the end of the
buffer raises TruncatedError and leaves the cursor where it was.
"""

import struct

from splicedrum.utils.validation import TruncatedError


class ByteReader:
    """
    Sequential reader over an immutable byte buffer.

    Example:
        reader = ByteReader(payload)
        track_id = reader.read_u8()
        reader.skip(3)
    """

    def __init__(self, data: bytes, base_offset: int = 0):
        self.data = bytes(data)
        self.position = 0
        # Offset of data[0] within the enclosing file, for error messages
        self.base_offset = base_offset

    def __len__(self) -> int:
        return len(self.data)

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self.data) - self.position

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.data)

    def _require(self, count: int, what: str) -> None:
        if count < 0:
            raise ValueError(f"Cannot read a negative number of bytes: {count}")
        if count > self.remaining:
            raise TruncatedError(
                f"Truncated {what} at offset 0x{self.base_offset + self.position:02X}: "
                f"need {count} bytes, {self.remaining} left"
            )

    def read(self, count: int, what: str = "data") -> bytes:
        """
        Read exactly count bytes.

        Args:
            count: Number of bytes
            what: Field name used in the error message

        Returns:
            The bytes read
        """
        self._require(count, what)
        chunk = self.data[self.position : self.position + count]
        self.position += count
        return chunk

    def skip(self, count: int, what: str = "reserved bytes") -> None:
        """Advance past count bytes without interpreting them."""
        self._require(count, what)
        self.position += count

    def read_u8(self, what: str = "byte") -> int:
        """Read one unsigned byte."""
        return self.read(1, what)[0]

    def read_f32_le(self, what: str = "float") -> float:
        """Read a little-endian IEEE-754 single precision float."""
        return struct.unpack("<f", self.read(4, what))[0]
