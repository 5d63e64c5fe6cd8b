"""Tests for RailmuxLogger."""

import json
from pathlib import Path

import pytest

from railmux.logger import RailmuxLogger


class TestRailmuxLogger:
    """Test RailmuxLogger."""

    def test_no_log_dir_means_no_files(self, tmp_path: Path, monkeypatch) -> None:
        """Test that nothing is written to disk without a log directory."""
        monkeypatch.chdir(tmp_path)
        logger = RailmuxLogger()
        logger.info("hello")
        assert list(tmp_path.iterdir()) == []

    def test_init_creates_log_directory(self, tmp_path: Path) -> None:
        log_dir = tmp_path / "nested" / "logs"
        RailmuxLogger(log_dir=log_dir)
        assert log_dir.exists()

    def test_log_writes_json_to_file(self, tmp_path: Path) -> None:
        log_dir = tmp_path / "logs"
        logger = RailmuxLogger(log_dir=log_dir)

        logger.log("INFO", "Test message", session="blog")

        log_files = list(log_dir.glob("railmux-*.log"))
        assert len(log_files) == 1

        with open(log_files[0]) as f:
            entry = json.loads(f.readline())

        assert entry["level"] == "INFO"
        assert entry["message"] == "Test message"
        assert entry["session"] == "blog"
        assert "timestamp" in entry

    def test_log_outputs_text_to_console(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        logger = RailmuxLogger(log_dir=tmp_path / "logs")
        logger.warning("Console test")

        output = capsys.readouterr().out
        assert "[WARNING] Console test" in output

    def test_debug_hidden_unless_verbose(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that DEBUG stays off the console but still reaches the file."""
        log_dir = tmp_path / "logs"
        RailmuxLogger(log_dir=log_dir).debug("quiet")
        assert capsys.readouterr().out == ""
        entries = [json.loads(line) for line in next(log_dir.glob("*.log")).read_text().splitlines()]
        assert entries[0]["level"] == "DEBUG"

        RailmuxLogger(verbose=True).debug("loud")
        assert "[DEBUG] loud" in capsys.readouterr().out

    @pytest.mark.parametrize("method,level", [("info", "INFO"), ("error", "ERROR")])
    def test_level_methods(self, tmp_path: Path, method: str, level: str) -> None:
        log_dir = tmp_path / "logs"
        logger = RailmuxLogger(log_dir=log_dir)
        getattr(logger, method)("msg")
        entry = json.loads(next(log_dir.glob("*.log")).read_text())
        assert entry["level"] == level

    def test_appends(self, tmp_path: Path) -> None:
        log_dir = tmp_path / "logs"
        logger = RailmuxLogger(log_dir=log_dir)
        logger.info("one")
        logger.info("two")
        lines = next(log_dir.glob("*.log")).read_text().splitlines()
        assert [json.loads(line)["message"] for line in lines] == ["one", "two"]
