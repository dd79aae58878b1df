"""
Validation errors and checks for splice pattern data.

Decoding failures are reported through the FormatError hierarchy. Each
subclass names the decode phase that failed so callers can tell a missing
marker apart from a truncated track without parsing messages.
"""

from typing import Sequence


class ValidationError(Exception):
    """Raised when pattern model data is out of range."""

    pass


class FormatError(ValueError):
    """
    Base class for malformed splice data.

    Attributes:
        phase: Decode phase that failed ("prologue", "header" or "track")
        offset: Absolute byte offset where the failing read started
    """

    message = "malformed splice data"
    phase = "unknown"

    def __init__(self, offset: int = 0, detail: str = ""):
        self.offset = offset
        self.detail = detail
        super().__init__(self.message)

    def describe(self) -> str:
        """Return the message with phase, offset and detail for display."""
        text = f"{self.message} ({self.phase} phase, offset 0x{self.offset:02X})"
        if self.detail:
            text += f": {self.detail}"
        return text


class MissingMarkerError(FormatError):
    """The SPLICE tag is absent or the prologue is short."""

    message = "missing marker"
    phase = "prologue"


class InvalidHeaderLengthError(FormatError):
    """Declared payload length cannot hold a full header."""

    message = "header too short"
    phase = "prologue"


class TruncatedHeaderError(FormatError):
    message = "truncated header"
    phase = "header"


class TruncatedTrackError(FormatError):
    message = "truncated track record"
    phase = "track"


def validate_byte(value: int, name: str = "value") -> None:
    """
    Validate that a value fits in one unsigned byte (0-255).

    Raises:
        ValidationError: If value is out of range
    """
    if not 0 <= value <= 255:
        raise ValidationError(f"{name} must be 0-255, got {value}")


def validate_steps(steps: Sequence[bool], count: int = 16) -> None:
    """
    Validate a step sequence length.

    Args:
        steps: Step flags
        count: Required number of steps (one measure of sixteenths)

    Raises:
        ValidationError: If the sequence has the wrong length
    """
    if len(steps) != count:
        raise ValidationError(f"Track must have exactly {count} steps, got {len(steps)}")


def validate_splice_marker(data: bytes) -> bool:
    """
    Check whether data starts with the SPLICE tag.

    Args:
        data: File data (at least 6 bytes)

    Returns:
        True if the marker is present
    """
    if len(data) < 6:
        return False

    return data[:6] == b"SPLICE"
