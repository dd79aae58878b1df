#!/usr/bin/env python3
"""
Example: Basic pattern decoding

Shows how to decode a .splice file and walk its tracks.

Usage:
    python basic_decode.py pattern_1.splice
"""

import sys

sys.path.insert(0, "..")

from splicedrum import FormatError, decode_file


def main():
    if len(sys.argv) != 2:
        print(__doc__)
        return 1

    try:
        pattern = decode_file(sys.argv[1])
    except FormatError as e:
        print(f"Cannot decode {sys.argv[1]}: {e.describe()}", file=sys.stderr)
        return 1

    # Classic listing
    print(pattern, end="")
    print()

    # Per-track details
    print("Tracks:")
    for track in pattern.tracks:
        hits = [i + 1 for i, on in enumerate(track.steps) if on]
        print(f"  {track.id:3d} {track.name:<10} {track.active_steps:2d} hits on steps {hits}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
