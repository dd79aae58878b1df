"""Splice format handlers."""

from splicedrum.formats.splice.reader import SpliceReader, decode, decode_file
from splicedrum.formats.splice.binary_parser import Region, SpliceParser

__all__ = ["SpliceReader", "SpliceParser", "Region", "decode", "decode_file"]
