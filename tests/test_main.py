"""Tests for the demonstration entrypoint."""

from pathlib import Path

import pytest

from src.config import settings
from src.main import main, parse_args


class TestParseArgs:
    def test_content_dir_flag(self, tmp_path: Path):
        args = parse_args(["--content-dir", str(tmp_path), "--strict"])
        assert args.content_dir == str(tmp_path)
        assert args.strict is True

    def test_no_strict_overrides_settings(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(settings, "CONTENT_STRICT", True)
        assert parse_args([]).strict is True
        assert parse_args(["--no-strict"]).strict is False


class TestMain:
    def test_bundled_content(self, capsys: pytest.CaptureFixture[str]):
        """Test that the demo prints the five sample records."""
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "Building{id='wall'" in out
        assert "Resource{id='iron'" in out
        assert "Component{id='glass'" in out
        assert "Food{id='french_fries'" in out
        assert "Crop{id='potato'" in out

    def test_missing_records_reported(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ):
        """Test that an empty content directory loads empty and reports misses."""
        assert main(["--content-dir", str(tmp_path)]) == 0
        out = capsys.readouterr().out
        assert "building 'wall': not found" in out
        assert "crop 'potato': not found" in out

    def test_strict_failure_exit_code(self, tmp_path: Path):
        """Test that strict mode returns 1 when a file is missing."""
        assert main(["--content-dir", str(tmp_path), "--strict"]) == 1

    def test_no_strict_loads_empty(self, tmp_path: Path):
        assert main(["--content-dir", str(tmp_path), "--no-strict"]) == 0
