"""Data models for splice pattern representation."""

from splicedrum.models.pattern import Header, Pattern, format_float32
from splicedrum.models.track import STEP_COUNT, Track, format_steps

__all__ = [
    "Header",
    "Pattern",
    "Track",
    "STEP_COUNT",
    "format_steps",
    "format_float32",
]
