"""Test configuration and fixtures."""

import struct
from typing import Iterable, Optional, Sequence, Tuple

import pytest

TrackSpec = Tuple[int, bytes, Sequence[int]]

KICK_STEPS = [1, 0] * 8


def build_splice(
    version: bytes = b"0.808-alpha",
    tempo: float = 120.0,
    tracks: Iterable[TrackSpec] = (),
    declared: Optional[int] = None,
    reserved: bytes = bytes(7),
    trailing: bytes = b"",
) -> bytes:
    """
    Assemble a splice file.

    Args:
        version: Raw version bytes, NUL padded to 32
        tempo: Tempo written as float32 little-endian
        tracks: (id, name, steps) tuples
        declared: Length byte; computed from the payload when None
        reserved: The 7 bytes between marker and length
        trailing: Extra bytes after the declared payload
    """
    payload = version.ljust(32, b"\x00") + struct.pack("<f", tempo)
    for track_id, name, steps in tracks:
        payload += bytes([track_id]) + bytes(3) + bytes([len(name)]) + name + bytes(steps)

    if declared is None:
        declared = len(payload)

    return b"SPLICE" + reserved + bytes([declared]) + payload + trailing


@pytest.fixture
def splice_builder():
    """Return the splice file builder."""
    return build_splice


@pytest.fixture
def minimal_data():
    """Marker, length 36 and a header with no tracks."""
    return build_splice()


@pytest.fixture
def kick_data():
    """One 'kick' track with alternating steps."""
    return build_splice(tracks=[(1, b"kick", KICK_STEPS)])


@pytest.fixture
def kit_data():
    """Four tracks in file order, as saved by the hardware."""
    return build_splice(
        version=b"0.909",
        tempo=98.4,
        tracks=[
            (0, b"kick", [1, 0, 0, 0] * 4),
            (1, b"snare", [0, 0, 0, 0, 1, 0, 0, 0] * 2),
            (2, b"clap", [0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0]),
            (3, b"hh-open", [0, 0, 1, 0] * 4),
        ],
    )


@pytest.fixture
def pattern_file(tmp_path, kick_data):
    """Write the kick pattern to disk and return its path."""
    path = tmp_path / "pattern_1.splice"
    path.write_bytes(kick_data)
    return path
