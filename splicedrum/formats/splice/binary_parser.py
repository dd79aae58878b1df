"""
Splice binary file parser.

Parses the binary structure of drum machine pattern (.splice) files.

Splice File Structure (variable size):
    Offset  Size    Description
    0x00    6       Marker "SPLICE"
    0x06    7       Reserved
    0x0D    1       Declared length (bytes remaining after 0x0E)
    0x0E    32      HW version string, NUL padded
    0x2E    4       Tempo, float32 little-endian
    0x32    ...     Track records until declared length is used up

Track record:
    Offset  Size    Description
    +0      1       Track id
    +1      3       Reserved
    +4      1       Name length (N)
    +5      N       Name
    +5+N    16      Steps, one byte per sixteenth (0 = off)

Bytes after the declared length are never read.
"""

from dataclasses import dataclass
from typing import BinaryIO, List, Optional, Tuple
import io
import logging
import struct

from splicedrum.models.pattern import Header, format_float32
from splicedrum.models.track import Track
from splicedrum.utils.validation import (
    InvalidHeaderLengthError,
    MissingMarkerError,
    TruncatedHeaderError,
    TruncatedTrackError,
)

logger = logging.getLogger(__name__)


@dataclass
class Region:
    """
    A decoded byte range, kept for structure dumps.
    """

    start: int
    end: int  # Exclusive
    name: str
    description: str

    @property
    def size(self) -> int:
        return self.end - self.start


class SpliceParser:
    """
    Parser for splice pattern files.

    Reads the prologue, header and track records in one sequential pass.
    Every read after the prologue is capped at the declared length, so a
    record that runs past it short-reads and is reported as truncated.

    Example:
        parser = SpliceParser()
        header, tracks = parser.parse_bytes(data)
    """

    # File structure constants
    MAGIC = b"SPLICE"
    PROLOGUE_SIZE = 14
    LENGTH_INDEX = 13
    VERSION_SIZE = 32
    TEMPO_SIZE = 4
    HEADER_SIZE = VERSION_SIZE + TEMPO_SIZE
    STEP_COUNT = 16
    TRACK_RESERVED_SIZE = 3
    # id + reserved + name length + steps
    TRACK_FIXED_SIZE = 1 + TRACK_RESERVED_SIZE + 1 + STEP_COUNT
    TEXT_ENCODING = "utf-8"

    # Offset table
    OFFSETS = {
        "marker": 0x00,
        "reserved": 0x06,
        "length": 0x0D,
        "version": 0x0E,
        "tempo": 0x2E,
        "tracks": 0x32,
    }

    def __init__(self):
        self._reset()

    def _reset(self) -> None:
        """Clear state left by a previous parse."""
        self.declared_length: Optional[int] = None
        self.header: Optional[Header] = None
        self.tracks: List[Track] = []
        self.regions: List[Region] = []
        self._stream: Optional[BinaryIO] = None
        self._offset = 0
        self._remaining: Optional[int] = None

    def parse_bytes(self, data: bytes) -> Tuple[Header, List[Track]]:
        """
        Parse splice data from bytes.

        Args:
            data: Raw file contents

        Returns:
            Tuple of (header, tracks)
        """
        return self.parse_stream(io.BytesIO(data))

    def parse_stream(self, stream: BinaryIO) -> Tuple[Header, List[Track]]:
        """
        Parse splice data from a binary stream.

        The stream is left positioned at the end of the declared length.

        Args:
            stream: Object with a read(n) method returning bytes

        Returns:
            Tuple of (header, tracks)

        Raises:
            FormatError: On the first malformed field
        """
        self._reset()
        self._stream = stream

        self.declared_length = self.read_prologue()
        self.header = self.read_header()
        self.tracks = self.read_tracks()

        logger.debug(
            "Decoded pattern %r at %g BPM with %d tracks",
            self.header.version,
            self.header.tempo,
            len(self.tracks),
        )
        return self.header, self.tracks

    def read_prologue(self) -> int:
        """
        Read the marker and declared length.

        Returns:
            Declared number of bytes following the prologue
        """
        raw = self._read(self.PROLOGUE_SIZE)

        if len(raw) < self.PROLOGUE_SIZE or raw[: len(self.MAGIC)] != self.MAGIC:
            raise MissingMarkerError(0, f"read {raw[:len(self.MAGIC)]!r}")

        # Only the low byte of the reserved/length field is meaningful
        length = raw[self.LENGTH_INDEX]
        self._add_region(0x00, 0x06, "MARKER", "File marker")
        self._add_region(0x06, 0x0D, "RESERVED", "Reserved")
        self._add_region(0x0D, 0x0E, "LENGTH", f"Declared length ({length})")

        if length < self.HEADER_SIZE:
            raise InvalidHeaderLengthError(
                self.LENGTH_INDEX, f"declared {length} bytes, need at least {self.HEADER_SIZE}"
            )

        logger.debug("Declared length: %d bytes", length)
        self._remaining = length
        return length

    def read_header(self) -> Header:
        """
        Read the version string and tempo.

        Returns:
            Parsed Header
        """
        start = self._offset
        raw = self._read(self.HEADER_SIZE)

        if len(raw) < self.HEADER_SIZE:
            raise TruncatedHeaderError(start, f"got {len(raw)} of {self.HEADER_SIZE} bytes")

        version = raw[: self.VERSION_SIZE].rstrip(b"\x00").decode(self.TEXT_ENCODING, "replace")
        tempo = struct.unpack("<f", raw[self.VERSION_SIZE :])[0]

        self._add_region(start, start + self.VERSION_SIZE, "VERSION", "HW version")
        self._add_region(start + self.VERSION_SIZE, self._offset, "TEMPO", "Tempo (float32 LE)")

        logger.debug("Header: version %r, tempo %g", version, tempo)
        return Header(version=version, tempo=tempo)

    def read_tracks(self) -> List[Track]:
        """
        Read track records until the declared length is used up.

        Returns:
            Tracks in file order
        """
        expected = self.declared_length - self.HEADER_SIZE
        consumed = 0
        tracks = []

        while consumed < expected:
            track, size = self.read_track()
            tracks.append(track)
            consumed += size

        return tracks

    def read_track(self) -> Tuple[Track, int]:
        """
        Read a single track record.

        Returns:
            Tuple of (track, bytes consumed)
        """
        start = self._offset

        track_id = self._read_field(1, start)[0]
        self._read_field(self.TRACK_RESERVED_SIZE, start)
        name_length = self._read_field(1, start)[0]
        name = self._read_field(name_length, start).decode(self.TEXT_ENCODING, "replace")
        raw_steps = self._read_field(self.STEP_COUNT, start)

        track = Track.from_raw(track_id, name, raw_steps)
        size = self._offset - start

        self._add_region(start, self._offset, f"TRACK_{track_id}", f"Track {name!r}")
        logger.debug("Track %d %r at 0x%02X (%d bytes)", track_id, name, start, size)

        return track, size

    def dump_structure(self) -> str:
        """
        Generate a text dump of file structure for debugging.

        Returns:
            Formatted structure description
        """
        lines = ["Splice File Structure:"]

        if self.declared_length is not None:
            lines.append(f"  Declared length: {self.declared_length} bytes")
        if self.header:
            lines.append(f"  Version: {self.header.version!r}")
            lines.append(f"  Tempo: {format_float32(self.header.tempo)}")
        lines.append(f"  Tracks: {len(self.tracks)}")

        lines.append("")
        lines.append("  Regions:")
        for region in self.regions:
            lines.append(
                f"    {region.name:12} @ 0x{region.start:02X}: {region.size:3d} bytes  {region.description}"
            )

        return "\n".join(lines)

    def _read_field(self, size: int, record_start: int) -> bytes:
        """Read one track field, failing if it comes up short."""
        raw = self._read(size)
        if len(raw) < size:
            field_start = self._offset - len(raw)
            raise TruncatedTrackError(
                record_start, f"field at 0x{field_start:02X} needs {size} bytes, got {len(raw)}"
            )
        return raw

    def _read(self, size: int) -> bytes:
        """
        Read up to size bytes, capped at the declared length.

        Loops over short reads and stops early only at end of stream.
        """
        if self._remaining is not None:
            size = min(size, self._remaining)

        buf = bytearray()
        while len(buf) < size:
            chunk = self._stream.read(size - len(buf))
            if not chunk:
                break
            buf.extend(chunk)

        self._offset += len(buf)
        if self._remaining is not None:
            self._remaining -= len(buf)

        return bytes(buf)

    def _add_region(self, start: int, end: int, name: str, description: str) -> None:
        self.regions.append(Region(start, end, name, description))


def parse_splice_file(filepath: str) -> Tuple[Header, List[Track]]:
    """
    Convenience function to parse a splice file.

    Args:
        filepath: Path to .splice file

    Returns:
        Tuple of (header, tracks)
    """
    parser = SpliceParser()
    with open(filepath, "rb") as f:
        return parser.parse_stream(f)
