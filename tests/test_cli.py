"""Tests for the splicedrum command line interface."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from typer.testing import CliRunner

from cli.app import app
from splicedrum import __version__

runner = CliRunner()

PATTERN_1_TEXT = """Saved with HW Version: 0.808-alpha
Tempo: 120
(0) kick\t|x---|x---|x---|x---|
(1) snare\t|----|x---|----|x---|
(2) clap\t|----|x-x-|----|----|
(3) hh-open\t|--x-|--x-|x-x-|--x-|
(4) hh-close\t|x---|x---|----|x--x|
(5) cowbell\t|----|----|--x-|----|
"""


class TestDecodeCommand:
    """Test cases for the decode command."""

    def test_decode_prints_canonical_text(self, pattern_1_file):
        """Test that decode output is exactly the rendering."""
        result = runner.invoke(app, ["decode", str(pattern_1_file)])

        assert result.exit_code == 0
        assert result.output == PATTERN_1_TEXT

    def test_decode_multiple_files(self, fixtures_dir):
        """Test decoding several files in one call."""
        files = [str(fixtures_dir / "pattern_1.splice"), str(fixtures_dir / "pattern_2.splice")]
        result = runner.invoke(app, ["decode", *files])

        assert result.exit_code == 0
        assert result.output.startswith(PATTERN_1_TEXT)
        assert "Tempo: 98.4\n" in result.output

    def test_decode_missing_file(self, tmp_path):
        """Test that a missing file exits with an error."""
        result = runner.invoke(app, ["decode", str(tmp_path / "sillyfilename.splice")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_decode_invalid_file(self, tmp_path):
        """Test that a decode error exits with an error."""
        path = tmp_path / "empty_SPLICE.splice"
        path.write_bytes(b"SPLICE")

        result = runner.invoke(app, ["decode", str(path)])

        assert result.exit_code == 1
        assert "Missing remaining-bytes field" in result.output


class TestInspectCommands:
    """Test cases for info, tracks and dump."""

    def test_info(self, pattern_1_file):
        """Test pattern info display."""
        result = runner.invoke(app, ["info", str(pattern_1_file), "--hex", "--structure"])

        assert result.exit_code == 0
        assert "0.808-alpha" in result.output
        assert "hh-close" in result.output
        assert "SPLICE File Structure" in result.output

    def test_tracks_by_id(self, fixtures_dir):
        """Test filtering tracks by id."""
        result = runner.invoke(app, ["tracks", str(fixtures_dir / "pattern_3.splice"), "--id", "12"])

        assert result.exit_code == 0
        assert "mid-tom" in result.output
        assert "hi-tom" not in result.output

    def test_tracks_unknown_id(self, pattern_1_file):
        """Test that an unknown id exits with an error."""
        result = runner.invoke(app, ["tracks", str(pattern_1_file), "--id", "99"])

        assert result.exit_code == 1
        assert "No track with id 99" in result.output

    def test_tracks_summary(self, pattern_1_file):
        """Test the summary table."""
        result = runner.invoke(app, ["tracks", str(pattern_1_file), "--summary"])

        assert result.exit_code == 0
        assert "cowbell" in result.output

    def test_tracks_summary_density(self, pattern_1_file):
        """Test that the summary table shows step density."""
        result = runner.invoke(app, ["tracks", str(pattern_1_file), "--summary"])

        assert result.exit_code == 0
        assert "Density" in result.output
        assert "(4/16)" in result.output

    def test_dump(self, fixtures_dir):
        """Test annotated hex dump including trailing bytes."""
        result = runner.invoke(app, ["dump", str(fixtures_dir / "pattern_5.splice")])

        assert result.exit_code == 0
        assert "TEMPO" in result.output
        assert "TRAILING" in result.output
        assert "0x0000" in result.output

    def test_dump_negative_start(self, pattern_1_file):
        """Test that a negative start offset is rejected."""
        result = runner.invoke(app, ["dump", str(pattern_1_file), "--start=-5"])

        assert result.exit_code == 1
        assert "Invalid start offset: -5" in result.output
        assert "0x-" not in result.output

    def test_dump_undecodable_file(self, tmp_path):
        """Test that files failing to decode are still dumped."""
        path = tmp_path / "bad.splice"
        path.write_bytes(b"SPLICE" + bytes(7) + b"\xc8")

        result = runner.invoke(app, ["dump", str(path), "--no-legend"])

        assert result.exit_code == 0
        assert "Warning" in result.output


class TestValidateCommand:
    """Test cases for the validate command."""

    def test_valid_file(self, pattern_1_file):
        """Test that a good file validates."""
        result = runner.invoke(app, ["validate", str(pattern_1_file)])

        assert result.exit_code == 0
        assert "INVALID" not in result.output
        assert "VALID" in result.output

    def test_invalid_file(self, tmp_path):
        """Test that a decode error makes the file invalid."""
        path = tmp_path / "nobytes.splice"
        path.write_bytes(b"")

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "INVALID" in result.output
        assert "Empty" in result.output

    def test_strict_trailing_bytes(self, fixtures_dir):
        """Test that --strict fails on warnings such as trailing bytes."""
        path = str(fixtures_dir / "pattern_5.splice")

        assert runner.invoke(app, ["validate", path]).exit_code == 0

        result = runner.invoke(app, ["validate", path, "--strict"])
        assert result.exit_code == 1


class TestAppOptions:
    """Test cases for global options."""

    def test_version(self):
        """Test the version flag."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_unknown_log_level(self, pattern_1_file):
        """Test that an unknown log level is rejected."""
        result = runner.invoke(app, ["--log-level", "LOUD", "decode", str(pattern_1_file)])

        assert result.exit_code != 0

    @pytest.mark.parametrize("flag", ["--verbose", "-v"])
    def test_verbose_decode_still_succeeds(self, pattern_1_file, flag):
        """Test decoding with debug logging enabled."""
        result = runner.invoke(app, [flag, "decode", str(pattern_1_file)])

        assert result.exit_code == 0
        assert "(5) cowbell" in result.output
