"""
Advisory cross-process locking for solc-select.

Two processes installing the same version, or switching the active
version at the same time, would otherwise race on the same files. The
locks here serialize those writes using the `filelock` library, which is
cross-platform and released automatically when a process dies.

Usage:
    from solc_select.core.locking import LockManager

    lock_manager = LockManager(config.lock_dir)
    with lock_manager.artifact_lock("0.8.4", timeout=30):
        # Safely write the artifact
        pass
"""

import logging
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock, Timeout

from .exceptions import LockTimeoutError

logger = logging.getLogger(__name__)


class LockManager:
    """
    Manages lock files for solc-select resources.

    Attributes:
        lock_dir: Directory where lock files are stored
    """

    def __init__(self, lock_dir: Path):
        """
        Initialize lock manager.

        The lock directory is created lazily on first acquisition so that
        read-only operations never touch the filesystem.

        Args:
            lock_dir: Directory for lock files
        """
        self.lock_dir = Path(lock_dir)

    @contextmanager
    def _acquire(self, name: str, timeout: float, description: str):
        lock_path = self.lock_dir / f"{name}.lock"
        try:
            self.lock_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise LockTimeoutError(
                f"Cannot create lock directory {self.lock_dir}: {e}", self.lock_dir
            ) from e

        lock = FileLock(str(lock_path), timeout=timeout)

        try:
            with lock:
                logger.debug(f"Acquired {description} lock: {lock_path}")
                yield
                logger.debug(f"Released {description} lock: {lock_path}")
        except Timeout as e:
            raise LockTimeoutError(
                f"Could not acquire {description} lock after {timeout}s. "
                "Another solc-select process may be running.",
                lock_path,
            ) from e

    @contextmanager
    def artifact_lock(self, version: str, timeout: float = 30):
        """
        Acquire the lock for one installed artifact.

        Args:
            version: Version whose artifact is being written
            timeout: Maximum wait time in seconds

        Raises:
            LockTimeoutError: If lock can't be acquired within timeout
        """
        # Sanitize version to create valid filename
        safe_version = version.replace("/", "-").replace("\\", "-").replace(":", "-")
        with self._acquire(f"artifact-{safe_version}", timeout, f"artifact {version}"):
            yield

    @contextmanager
    def pointer_lock(self, timeout: float = 30):
        """
        Acquire the lock for the active version pointer.

        Args:
            timeout: Maximum wait time in seconds

        Raises:
            LockTimeoutError: If lock can't be acquired within timeout
        """
        with self._acquire("global-version", timeout, "active version"):
            yield


__all__ = ["LockManager"]
