"""Utility functions for splicedrum."""

from splicedrum.utils.validation import (
    FormatError,
    InvalidHeaderLengthError,
    MissingMarkerError,
    TruncatedHeaderError,
    TruncatedTrackError,
    ValidationError,
    validate_byte,
    validate_splice_marker,
    validate_steps,
)

__all__ = [
    "FormatError",
    "InvalidHeaderLengthError",
    "MissingMarkerError",
    "TruncatedHeaderError",
    "TruncatedTrackError",
    "ValidationError",
    "validate_byte",
    "validate_splice_marker",
    "validate_steps",
]
