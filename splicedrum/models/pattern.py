"""
Pattern data model - the top-level container for decoded splice data.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple
import math
import struct

from splicedrum.models.track import Track


def format_float32(value: float) -> str:
    """
    Shortest %g-style text that reads back as the same float32.

    A float32 tempo such as 123456.78 needs more than the six digits
    plain "%g" gives it. Values below 1e-4 or from 1e6 up use the
    exponent form, as %g does.
    """
    if not math.isfinite(value):
        return f"{value:g}"

    try:
        packed = struct.pack("<f", value)
    except OverflowError:
        # Out of float32 range, so not a decoded value
        return f"{value:g}"

    # Fewest mantissa digits that still read back as the same float32
    for digits in range(9):
        text = f"{value:.{digits}e}"
        if struct.pack("<f", float(text)) == packed:
            break

    exponent = int(text.split("e")[1])
    if exponent < -4 or exponent >= 6:
        return text
    return f"{value:.{max(0, digits - exponent)}f}"


@dataclass(frozen=True)
class Header:
    """
    Pattern header.

    Attributes:
        version: Hardware version string the pattern was saved with
        tempo: Tempo in BPM (float32, may be fractional)
    """

    version: str = ""
    tempo: float = 120.0


@dataclass(frozen=True)
class Pattern:
    """
    Complete decoded pattern.

    A Pattern is only ever built once every field has been decoded, so
    a reader either returns one of these or raises.

    Attributes:
        header: Version and tempo
        tracks: Tracks in file order (which is also playback order)
    """

    header: Header = field(default_factory=Header)
    tracks: Tuple[Track, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "tracks", tuple(self.tracks))

    @property
    def version(self) -> str:
        return self.header.version

    @property
    def tempo(self) -> float:
        return self.header.tempo

    def get_track(self, track_id: int) -> Optional[Track]:
        """
        Find a track by its id.

        Args:
            track_id: Track id (0-255)

        Returns:
            First track with that id, or None
        """
        for track in self.tracks:
            if track.id == track_id:
                return track
        return None

    def to_dict(self) -> dict:
        """Plain-data view for JSON output."""
        return {
            "version": self.header.version,
            "tempo": self.header.tempo,
            "tracks": [
                {"id": t.id, "name": t.name, "steps": list(t.steps)} for t in self.tracks
            ],
        }

    def __str__(self) -> str:
        text = f"Saved with HW Version: {self.header.version}\n"
        text += f"Tempo: {format_float32(self.header.tempo)}\n"
        for track in self.tracks:
            text += str(track)
        return text
