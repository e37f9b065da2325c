"""
Unit tests for filesystem helpers.
"""

import os
import stat
import pytest
from unittest.mock import patch

from solc_select.core.exceptions import StoreError
from solc_select.core.filesystem import (
    EXECUTABLE_MODE,
    atomic_write,
    is_executable,
    write_executable,
)


class TestAtomicWrite:
    """Tests for atomic_write()."""

    def test_write_text(self, tmp_path):
        """Test text content is written exactly."""
        target = tmp_path / "global-version"
        atomic_write(target, "0.8.4")

        assert target.read_bytes() == b"0.8.4"

    def test_write_bytes(self, tmp_path):
        """Test bytes content is written exactly."""
        target = tmp_path / "data.bin"
        atomic_write(target, b"\x00\x01\x02")

        assert target.read_bytes() == b"\x00\x01\x02"

    def test_replaces_existing(self, tmp_path):
        """Test existing content is fully replaced."""
        target = tmp_path / "global-version"
        target.write_text("0.10.100-long-old-value")

        atomic_write(target, "0.8.4")

        assert target.read_text() == "0.8.4"

    def test_creates_parent(self, tmp_path):
        """Test missing parent directories are created."""
        target = tmp_path / "a" / "b" / "file"
        atomic_write(target, "x")

        assert target.read_text() == "x"

    def test_no_temp_files_left(self, tmp_path):
        """Test temp file is renamed into place."""
        atomic_write(tmp_path / "file", "x")

        assert [p.name for p in tmp_path.iterdir()] == ["file"]

    def test_failure_keeps_original(self, tmp_path):
        """Test original file survives a failed rename."""
        target = tmp_path / "file"
        target.write_text("original")

        with patch("pathlib.Path.replace", side_effect=OSError("disk full")):
            with pytest.raises(StoreError, match="disk full"):
                atomic_write(target, "new")

        assert target.read_text() == "original"
        assert [p.name for p in tmp_path.iterdir()] == ["file"]


class TestWriteExecutable:
    """Tests for write_executable()."""

    def test_sets_mode(self, tmp_path):
        """Test file gets rwxrwxr-x."""
        target = tmp_path / "solc-0.8.4"
        write_executable(target, b"binary")

        assert stat.S_IMODE(target.stat().st_mode) == EXECUTABLE_MODE
        assert target.read_bytes() == b"binary"
        assert is_executable(target)

    def test_overwrites(self, tmp_path):
        """Test existing file is overwritten."""
        target = tmp_path / "solc-0.8.4"
        write_executable(target, b"old-binary-content")
        write_executable(target, b"new")

        assert target.read_bytes() == b"new"

    def test_missing_directory(self, tmp_path):
        """Test write into a missing directory raises StoreError with the path."""
        target = tmp_path / "missing" / "solc-0.8.4"

        with pytest.raises(StoreError) as exc_info:
            write_executable(target, b"binary")

        assert exc_info.value.path == target

    def test_chmod_failure(self, tmp_path):
        """Test permission change failure raises StoreError."""
        target = tmp_path / "solc-0.8.4"

        with patch(
            "solc_select.core.filesystem.os.chmod", side_effect=OSError("denied")
        ):
            with pytest.raises(StoreError, match="executable"):
                write_executable(target, b"binary")


class TestIsExecutable:
    """Tests for is_executable()."""

    def test_missing_file(self, tmp_path):
        assert is_executable(tmp_path / "nope") is False

    def test_directory(self, tmp_path):
        assert is_executable(tmp_path) is False

    def test_plain_file(self, tmp_path):
        target = tmp_path / "plain"
        target.write_bytes(b"x")
        os.chmod(target, 0o644)

        assert is_executable(target) is False
