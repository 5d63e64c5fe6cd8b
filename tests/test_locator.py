"""Tests for railmux locator module."""

import shutil
from pathlib import Path

import pytest

from railmux.locator import FakeLocator, SystemLocator


class TestSystemLocator:
    """Test the filesystem-backed locator."""

    def _make_binstub(self, root: Path, name: str, mode: int) -> Path:
        bin_dir = root / "bin"
        bin_dir.mkdir(exist_ok=True)
        path = bin_dir / name
        path.write_text("#!/bin/sh\n")
        path.chmod(mode)
        return path

    def test_non_executable_file(self, tmp_path):
        """Test that a file without the executable bit is rejected."""
        self._make_binstub(tmp_path, "rails", 0o644)
        locator = SystemLocator(tmp_path)
        assert locator.is_executable_path("bin/rails") is False

    def test_executable_file(self, tmp_path):
        """Test that an executable file relative to cwd is found."""
        self._make_binstub(tmp_path, "rails", 0o755)
        locator = SystemLocator(tmp_path)
        assert locator.is_executable_path("bin/rails") is True

    def test_missing_file(self, tmp_path):
        """Test that a missing path is not executable."""
        locator = SystemLocator(tmp_path)
        assert locator.is_executable_path("bin/rails") is False

    def test_directory_is_not_executable(self, tmp_path):
        """Test that a directory named like the binstub is rejected."""
        (tmp_path / "bin" / "rails").mkdir(parents=True)
        locator = SystemLocator(tmp_path)
        assert locator.is_executable_path("bin/rails") is False

    def test_absolute_path(self, tmp_path):
        """Test that absolute paths ignore the locator cwd."""
        path = self._make_binstub(tmp_path, "rake", 0o755)
        locator = SystemLocator(Path("/"))
        assert locator.is_executable_path(str(path)) is True

    def test_defaults_to_current_directory(self, tmp_path, monkeypatch):
        """Test that relative paths use the process cwd when none is given."""
        self._make_binstub(tmp_path, "rails", 0o755)
        monkeypatch.chdir(tmp_path)
        assert SystemLocator().is_executable_path("bin/rails") is True

    def test_is_on_search_path(self):
        """Test that PATH lookup agrees with shutil.which."""
        locator = SystemLocator()
        assert locator.is_on_search_path("sh") == (shutil.which("sh") is not None)
        assert locator.is_on_search_path("railmux-no-such-command-12345") is False


class TestFakeLocator:
    """Test the in-memory locator."""

    def test_empty(self):
        locator = FakeLocator()
        assert locator.is_executable_path("bin/rails") is False
        assert locator.is_on_search_path("bundle") is False

    def test_configured(self):
        locator = FakeLocator(executables=["bin/rails"], commands=["bundle"])
        assert locator.is_executable_path("bin/rails") is True
        assert locator.is_executable_path("bin/rake") is False
        assert locator.is_on_search_path("bundle") is True
        assert locator.is_on_search_path("tmux") is False
