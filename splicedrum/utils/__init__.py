"""Utility functions for splicedrum."""

from splicedrum.utils.byte_reader import ByteReader
from splicedrum.utils.validation import (
    ErrorKind,
    SpliceError,
    EmptyFileError,
    BadFileTypeError,
    MissingLengthFieldError,
    InvalidByteCountError,
    TruncatedError,
    validate_splice,
    is_splice,
)

__all__ = [
    "ByteReader",
    "ErrorKind",
    "SpliceError",
    "EmptyFileError",
    "BadFileTypeError",
    "MissingLengthFieldError",
    "InvalidByteCountError",
    "TruncatedError",
    "validate_splice",
    "is_splice",
]
