"""Format handlers for SPLICE files."""

from splicedrum.formats.splice import SpliceReader, SpliceParser

__all__ = ["SpliceReader", "SpliceParser"]
