"""SPLICE format handlers."""

from splicedrum.formats.splice.reader import SpliceReader, decode, decode_file
from splicedrum.formats.splice.binary_parser import SpliceParser, SpliceHeader

__all__ = ["SpliceReader", "SpliceParser", "SpliceHeader", "decode", "decode_file"]
