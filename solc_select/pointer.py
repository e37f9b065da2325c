"""
Active version pointer.

A single file (``global-version``) holds the identifier of the selected
compiler. Its value is not checked against the installed set when read;
callers resolve stale pointers themselves.
"""

import logging
from typing import Optional

from .core.config import SolcSelectConfig
from .core.exceptions import NoActiveVersionError, StoreError
from .core.filesystem import atomic_write
from .core.locking import LockManager

logger = logging.getLogger(__name__)


class ActiveVersionPointer:
    """Reads and replaces the active version file."""

    def __init__(
        self, config: SolcSelectConfig, lock_manager: Optional[LockManager] = None
    ):
        self.config = config
        self.path = config.global_version_file
        self.lock_manager = lock_manager or LockManager(config.lock_dir)

    def read(self) -> str:
        """
        Read the active version.

        Returns:
            Version identifier with surrounding whitespace stripped

        Raises:
            NoActiveVersionError: If no version was ever selected
            StoreError: If the file cannot be read
        """
        try:
            return self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError as e:
            raise NoActiveVersionError(self.path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise StoreError(f"Failed to read {self.path}: {e}", self.path) from e

    def read_or_none(self) -> Optional[str]:
        """Read the active version, or None if none is selected."""
        try:
            version = self.read()
        except NoActiveVersionError:
            return None
        return version or None

    def write(self, version: str) -> None:
        """
        Replace the pointer contents with ``version``.

        Raises:
            StoreError: If the file cannot be written
            LockTimeoutError: If another process holds the pointer lock
        """
        with self.lock_manager.pointer_lock(timeout=self.config.lock_timeout):
            atomic_write(self.path, version)
        logger.debug(f"Active version set to {version} in {self.path}")


def read_active_version(config: SolcSelectConfig) -> str:
    return ActiveVersionPointer(config).read()


def write_active_version(config: SolcSelectConfig, version: str) -> None:
    ActiveVersionPointer(config).write(version)


__all__ = ["ActiveVersionPointer", "read_active_version", "write_active_version"]
