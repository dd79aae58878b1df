"""Format handlers for splice pattern files."""

from splicedrum.formats.splice import SpliceParser, SpliceReader

__all__ = ["SpliceReader", "SpliceParser"]
