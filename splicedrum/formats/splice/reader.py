"""
Splice file reader.

Reads .splice binary files and converts them to the Pattern model.
"""

from pathlib import Path
from typing import BinaryIO, Union
import logging

from splicedrum.models.pattern import Pattern
from splicedrum.formats.splice.binary_parser import SpliceParser
from splicedrum.utils.validation import validate_splice_marker

logger = logging.getLogger(__name__)

ByteSource = Union[bytes, bytearray, memoryview, BinaryIO]


class SpliceReader:
    """
    Reader for splice pattern files.

    Parses .splice binary files and constructs Pattern objects.

    Example:
        pattern = SpliceReader.read("pattern_1.splice")
        print(f"Version: {pattern.version}, Tempo: {pattern.tempo}")
    """

    def __init__(self):
        self.parser = SpliceParser()

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> Pattern:
        """
        Read a splice file and return a Pattern.

        Args:
            filepath: Path to .splice file

        Returns:
            Parsed Pattern object
        """
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> Pattern:
        """
        Parse a splice file.

        Args:
            filepath: Path to .splice file

        Returns:
            Parsed Pattern object
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        logger.debug("Reading %s", filepath)
        with open(filepath, "rb") as f:
            return self.parse_stream(f)

    def parse_bytes(self, data: Union[bytes, bytearray, memoryview]) -> Pattern:
        """
        Parse splice data from bytes.

        Args:
            data: Raw splice file contents

        Returns:
            Parsed Pattern object
        """
        header, tracks = self.parser.parse_bytes(bytes(data))
        return Pattern(header=header, tracks=tracks)

    def parse_stream(self, stream: BinaryIO) -> Pattern:
        """
        Parse splice data from an open binary stream.

        The caller keeps ownership of the stream.

        Args:
            stream: Binary file-like object

        Returns:
            Parsed Pattern object
        """
        header, tracks = self.parser.parse_stream(stream)
        return Pattern(header=header, tracks=tracks)

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file looks like a splice pattern.

        Args:
            filepath: Path to check

        Returns:
            True if the file starts with the SPLICE marker
        """
        filepath = Path(filepath)

        if not filepath.exists():
            return False

        try:
            with open(filepath, "rb") as f:
                head = f.read(SpliceParser.PROLOGUE_SIZE)
        except OSError:
            return False

        return len(head) == SpliceParser.PROLOGUE_SIZE and validate_splice_marker(head)

    @classmethod
    def get_file_info(cls, filepath: Union[str, Path]) -> dict:
        """
        Get basic information about a splice file without full parsing.

        Args:
            filepath: Path to .splice file

        Returns:
            Dictionary with file info
        """
        filepath = Path(filepath)

        with open(filepath, "rb") as f:
            data = f.read()

        info = {
            "valid": False,
            "size": len(data),
        }

        if len(data) >= SpliceParser.PROLOGUE_SIZE:
            info["marker"] = data[:6].decode("ascii", errors="replace")
            info["valid"] = validate_splice_marker(data)
            declared = data[SpliceParser.LENGTH_INDEX]
            info["declared_length"] = declared
            info["expected_size"] = SpliceParser.PROLOGUE_SIZE + declared
            info["trailing_bytes"] = max(0, len(data) - info["expected_size"])

        return info


def decode(source: ByteSource) -> Pattern:
    """
    Decode one complete splice pattern.

    Args:
        source: Bytes-like object or binary stream

    Returns:
        Fully populated Pattern

    Raises:
        FormatError: If the data is malformed
        TypeError: If source is neither bytes-like nor readable
    """
    reader = SpliceReader()

    if isinstance(source, (bytes, bytearray, memoryview)):
        return reader.parse_bytes(source)
    if hasattr(source, "read"):
        return reader.parse_stream(source)

    raise TypeError(f"Cannot decode from {type(source).__name__}")


def decode_file(filepath: Union[str, Path]) -> Pattern:
    """
    Decode the splice file at filepath.

    Args:
        filepath: Path to .splice file

    Returns:
        Fully populated Pattern
    """
    return SpliceReader.read(filepath)
