"""
Filesystem helpers for solc-select.

Provides atomic text/bytes writes and permission changes, translating
OSError into StoreError with the offending path in the message.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from .exceptions import StoreError

logger = logging.getLogger(__name__)

# rwxrwxr-x
EXECUTABLE_MODE = 0o775


def atomic_write(
    file_path: Union[str, Path], content: Union[str, bytes], encoding: str = "utf-8"
) -> None:
    """
    Write file atomically using temp file + rename.

    The file is never observed in a partially-written state; if the write
    fails, the original file (if any) remains unchanged.

    Args:
        file_path: Path to write to
        content: Content to write (string or bytes)
        encoding: Text encoding (used only for string content)

    Raises:
        StoreError: If the file cannot be written

    Example:
        >>> atomic_write('global-version', '0.8.4')
    """
    file_path = Path(file_path)

    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        # Temp file in the same directory keeps the rename on one filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
        )
    except OSError as e:
        raise StoreError(f"Failed to write {file_path}: {e}", file_path) from e

    temp_path = Path(temp_path_str)

    try:
        if isinstance(content, str):
            with open(temp_fd, "w", encoding=encoding, newline="") as f:
                f.write(content)
        else:
            with open(temp_fd, "wb") as f:
                f.write(content)

        temp_path.replace(file_path)
    except OSError as e:
        temp_path.unlink(missing_ok=True)
        raise StoreError(f"Failed to write {file_path}: {e}", file_path) from e


def write_executable(file_path: Union[str, Path], content: bytes) -> None:
    """
    Write bytes to a file, then mark it executable (rwxrwxr-x).

    The write and the permission change are two steps: a reader opening
    the file in between may see it as non-executable.

    Args:
        file_path: Destination path (overwritten if it exists)
        content: File contents

    Raises:
        StoreError: If writing or changing permissions fails
    """
    file_path = Path(file_path)

    try:
        file_path.write_bytes(content)
    except OSError as e:
        raise StoreError(f"Failed to write {file_path}: {e}", file_path) from e

    try:
        os.chmod(file_path, EXECUTABLE_MODE)
    except OSError as e:
        raise StoreError(
            f"Failed to make {file_path} executable: {e}", file_path
        ) from e

    logger.debug(f"Wrote {len(content)} bytes to {file_path}")


def is_executable(file_path: Union[str, Path]) -> bool:
    """Check whether a path is a regular file the current user may execute."""
    file_path = Path(file_path)
    return file_path.is_file() and os.access(file_path, os.X_OK)


__all__ = ["EXECUTABLE_MODE", "atomic_write", "write_executable", "is_executable"]
