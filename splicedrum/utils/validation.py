"""
Validation utilities and error kinds for SPLICE pattern data.
"""

from enum import Enum


SPLICE_MAGIC = b"SPLICE"

# Offset of the declared remaining-byte count; the payload starts right after it
LENGTH_FIELD_OFFSET = 13
PAYLOAD_OFFSET = LENGTH_FIELD_OFFSET + 1


class ErrorKind(Enum):
    """Categories of decode failure."""

    EMPTY_FILE = "empty_file"
    BAD_FILE_TYPE = "bad_file_type"
    MISSING_LENGTH_FIELD = "missing_length_field"
    INVALID_BYTE_COUNT = "invalid_byte_count"
    TRUNCATED = "truncated"


class SpliceError(ValueError):
    """Raised when SPLICE data cannot be decoded."""

    kind: ErrorKind = None

    def __init__(self, message: str, kind: ErrorKind = None):
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class EmptyFileError(SpliceError):
    """The input contains no bytes at all."""

    kind = ErrorKind.EMPTY_FILE


class BadFileTypeError(SpliceError):
    """The input does not start with the SPLICE tag."""

    kind = ErrorKind.BAD_FILE_TYPE


class MissingLengthFieldError(SpliceError):
    """The input is too short to hold the remaining-byte count."""

    kind = ErrorKind.MISSING_LENGTH_FIELD


class InvalidByteCountError(SpliceError):
    """The declared payload is longer than the bytes present."""

    kind = ErrorKind.INVALID_BYTE_COUNT


class TruncatedError(SpliceError):
    """A field runs past the end of the payload."""

    kind = ErrorKind.TRUNCATED


def validate_splice(data: bytes) -> None:
    """
    Check that a buffer is plausibly a SPLICE file.

    Buffers shorter than the 6-byte tag fail as a bad file type, since
    their first bytes cannot spell "SPLICE".

    Args:
        data: Raw file contents

    Raises:
        EmptyFileError: If data is empty
        BadFileTypeError: If the tag is not "SPLICE"
        MissingLengthFieldError: If the remaining-byte count is missing
    """
    if len(data) == 0:
        raise EmptyFileError("Not a SPLICE file: no bytes to decode")

    if data[: len(SPLICE_MAGIC)] != SPLICE_MAGIC:
        raise BadFileTypeError("Not a SPLICE file: missing SPLICE tag")

    if len(data) < PAYLOAD_OFFSET:
        raise MissingLengthFieldError(
            f"Missing remaining-bytes field: file is {len(data)} bytes "
            f"(need at least {PAYLOAD_OFFSET})"
        )


def is_splice(data: bytes) -> bool:
    """
    Check SPLICE header without raising.

    Args:
        data: File data

    Returns:
        True if data passes header validation
    """
    try:
        validate_splice(data)
    except SpliceError:
        return False
    return True
