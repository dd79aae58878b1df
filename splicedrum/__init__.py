"""
splicedrum - Decoder for drum machine .splice pattern files.

This library provides tools to:
- Decode .splice pattern files into Pattern objects
- Inspect the header (HW version, tempo) and per-track step data
- Render a pattern in the classic text form

Example usage:
    from splicedrum import decode_file

    pattern = decode_file("pattern_1.splice")
    print(pattern)
"""

__version__ = "0.1.0"
__author__ = "splicedrum Contributors"

from splicedrum.formats.splice.reader import SpliceReader, decode, decode_file
from splicedrum.formats.splice.binary_parser import SpliceParser
from splicedrum.models.pattern import Header, Pattern, format_float32
from splicedrum.models.track import Track, format_steps
from splicedrum.utils.validation import (
    FormatError,
    InvalidHeaderLengthError,
    MissingMarkerError,
    TruncatedHeaderError,
    TruncatedTrackError,
)

__all__ = [
    "decode",
    "decode_file",
    "SpliceReader",
    "SpliceParser",
    "Pattern",
    "Header",
    "Track",
    "format_steps",
    "format_float32",
    "FormatError",
    "MissingMarkerError",
    "InvalidHeaderLengthError",
    "TruncatedHeaderError",
    "TruncatedTrackError",
]
