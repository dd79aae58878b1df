"""Tests for the splicedrum command line interface."""

import json
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.app import app
from cli.commands.validate import validate_file
from splicedrum import __version__
from splicedrum.utils.validation import TruncatedTrackError

runner = CliRunner()


@pytest.fixture
def broken_file(tmp_path, kick_data):
    path = tmp_path / "broken.splice"
    path.write_bytes(kick_data[:-3])
    return path


@pytest.fixture
def unreadable_file(tmp_path):
    # Exists, but opening it for reading fails
    path = tmp_path / "folder.splice"
    path.mkdir()
    return path


class TestInfoCommand:
    """Tests for the info command."""

    def test_classic_rendering(self, pattern_file):
        """Default output is the classic text listing."""
        result = runner.invoke(app, ["info", str(pattern_file)])

        assert result.exit_code == 0
        assert result.stdout == (
            "Saved with HW Version: 0.808-alpha\n"
            "Tempo: 120\n"
            "(1) kick\t|x-x-|x-x-|x-x-|x-x-|\n"
        )

    def test_json_output(self, pattern_file):
        """--json prints the pattern as JSON."""
        result = runner.invoke(app, ["info", str(pattern_file), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["version"] == "0.808-alpha"
        assert data["tracks"][0]["name"] == "kick"
        assert len(data["tracks"][0]["steps"]) == 16

    def test_table_output(self, pattern_file):
        """--table prints a Rich panel."""
        result = runner.invoke(app, ["info", str(pattern_file), "--table"])

        assert result.exit_code == 0
        assert "Splice Pattern Info" in result.output
        assert "kick" in result.output

    def test_missing_file(self, tmp_path):
        """A missing file is reported and exits 1."""
        result = runner.invoke(app, ["info", str(tmp_path / "nope.splice")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_malformed_file(self, broken_file):
        """A decode error is reported and exits 1."""
        result = runner.invoke(app, ["info", str(broken_file)])

        assert result.exit_code == 1
        assert "truncated track record" in result.output


class TestTracksCommand:
    """Tests for the tracks command."""

    def test_lists_tracks(self, tmp_path, kit_data):
        """Every track and the tempo are listed."""
        path = tmp_path / "kit.splice"
        path.write_bytes(kit_data)

        result = runner.invoke(app, ["tracks", str(path)])

        assert result.exit_code == 0
        for name in ("kick", "snare", "clap", "hh-open"):
            assert name in result.output
        assert "98.4 BPM" in result.output

    def test_single_track(self, tmp_path, kit_data):
        """--id limits the table to one track."""
        path = tmp_path / "kit.splice"
        path.write_bytes(kit_data)

        result = runner.invoke(app, ["tracks", str(path), "--id", "1"])

        assert result.exit_code == 0
        assert "snare" in result.output
        assert "clap" not in result.output

    def test_unknown_track(self, pattern_file):
        """An unknown --id exits 1."""
        result = runner.invoke(app, ["tracks", str(pattern_file), "--id", "9"])

        assert result.exit_code == 1
        assert "No track with id 9" in result.output


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid(self, pattern_file):
        """A well-formed file is VALID."""
        result = runner.invoke(app, ["validate", str(pattern_file)])

        assert result.exit_code == 0
        assert "VALID" in result.output
        assert "INVALID" not in result.output

    def test_invalid(self, broken_file):
        """A truncated file is INVALID and exits 1."""
        result = runner.invoke(app, ["validate", str(broken_file)])

        assert result.exit_code == 1
        assert "INVALID" in result.output
        assert "track" in result.output

    def test_trailing_bytes_ignored(self, tmp_path, kick_data):
        """Trailing bytes are noted but the file stays VALID."""
        path = tmp_path / "padded.splice"
        path.write_bytes(kick_data + bytes(4))

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 0
        assert "4 trailing bytes ignored" in result.output

    def test_strict_rejects_trailing_bytes(self, tmp_path, kick_data):
        """--strict makes trailing bytes invalid and says why."""
        path = tmp_path / "padded.splice"
        path.write_bytes(kick_data + bytes(4))

        result = runner.invoke(app, ["validate", str(path), "--strict"])

        assert result.exit_code == 1
        assert "INVALID" in result.output
        assert "4 trailing bytes after declared length" in result.output
        assert "ignored" not in result.output

    def test_unreadable_file(self, unreadable_file):
        """A read failure is reported and exits 1."""
        result = runner.invoke(app, ["validate", str(unreadable_file)])

        assert result.exit_code == 1
        assert "Cannot read" in result.output
        assert not isinstance(result.exception, OSError)

    def test_validate_file_result(self, broken_file):
        """validate_file keeps the decode error."""
        result = validate_file(broken_file)

        assert result.valid is False
        assert isinstance(result.error, TruncatedTrackError)
        assert result.declared_length == 61

    def test_validate_file_strict(self, tmp_path, kick_data):
        """validate_file with strict records the trailing-byte reason."""
        path = tmp_path / "padded.splice"
        path.write_bytes(kick_data + bytes(2))

        result = validate_file(path, strict=True)

        assert result.valid is False
        assert result.error is None
        assert result.track_count == 1
        assert "2 trailing bytes" in result.reason


class TestDumpCommand:
    """Tests for the dump command."""

    def test_regions_labelled(self, pattern_file):
        """Each decoded region gets a label."""
        result = runner.invoke(app, ["dump", str(pattern_file), "--no-legend"])

        assert result.exit_code == 0
        for name in ("MARKER", "LENGTH", "VERSION", "TEMPO", "TRACK_1"):
            assert name in result.output

    def test_failure_shows_partial_dump(self, broken_file):
        """On a decode error the regions read so far are still shown."""
        result = runner.invoke(app, ["dump", str(broken_file)])

        assert result.exit_code == 1
        assert "TEMPO" in result.output
        assert "REST" in result.output
        assert "truncated track record" in result.output

    def test_raw(self, pattern_file):
        """--raw prints a plain hex dump."""
        result = runner.invoke(app, ["dump", str(pattern_file), "--raw"])

        assert result.exit_code == 0
        assert "SPLICE" in result.output

    def test_zero_width_rejected(self, pattern_file):
        """--width 0 is a usage error, not a crash."""
        result = runner.invoke(app, ["dump", str(pattern_file), "--raw", "--width", "0"])

        assert result.exit_code == 2
        assert not isinstance(result.exception, ZeroDivisionError)

    def test_unreadable_file(self, unreadable_file):
        """A read failure is reported and exits 1."""
        result = runner.invoke(app, ["dump", str(unreadable_file)])

        assert result.exit_code == 1
        assert "Cannot read" in result.output


def test_version_command():
    """version prints the package version."""
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_version_flag():
    """--version prints the program name."""
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert "splicedrum" in result.output


def test_verbose_logs_decode_steps(pattern_file):
    """--verbose logs each decode phase."""
    result = runner.invoke(app, ["--verbose", "info", str(pattern_file)])

    assert result.exit_code == 0
    assert "(1) kick" in result.output
    assert "Declared length: 61 bytes" in result.output
    assert "Header: version '0.808-alpha', tempo 120" in result.output
    assert "Track 1 'kick'" in result.output


def test_quiet_by_default(pattern_file):
    """Without --verbose no debug records are printed."""
    result = runner.invoke(app, ["info", str(pattern_file)])

    assert result.exit_code == 0
    assert "Declared length" not in result.output
