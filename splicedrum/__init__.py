"""
splicedrum - Decoder for SPLICE drum machine pattern files.

This library provides tools to:
- Validate and decode .splice binary pattern files
- Render decoded patterns as canonical text

Example usage:
    from splicedrum import decode_file, render_pattern

    pattern = decode_file("pattern_1.splice")
    print(render_pattern(pattern), end="")
"""

__version__ = "0.1.0"
__author__ = "splicedrum Contributors"

from splicedrum.formats.splice.reader import SpliceReader, decode, decode_file
from splicedrum.formats.splice.binary_parser import SpliceParser, SpliceHeader
from splicedrum.models.pattern import Pattern
from splicedrum.models.track import Track
from splicedrum.render import render_pattern, format_tempo, format_steps
from splicedrum.utils.validation import (
    ErrorKind,
    SpliceError,
    EmptyFileError,
    BadFileTypeError,
    MissingLengthFieldError,
    InvalidByteCountError,
    TruncatedError,
    validate_splice,
)

__all__ = [
    "SpliceReader",
    "SpliceParser",
    "SpliceHeader",
    "Pattern",
    "Track",
    "decode",
    "decode_file",
    "render_pattern",
    "format_tempo",
    "format_steps",
    "validate_splice",
    "ErrorKind",
    "SpliceError",
    "EmptyFileError",
    "BadFileTypeError",
    "MissingLengthFieldError",
    "InvalidByteCountError",
    "TruncatedError",
]
