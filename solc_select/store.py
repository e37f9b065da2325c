"""
Local install store.

The artifacts directory is the single source of truth for what is
installed: each version is one executable file named ``solc-<version>``.
There is no manifest, so the installed set is always re-derived from a
directory listing.
"""

import logging
from pathlib import Path
from typing import Optional, Set

from .core.config import SolcSelectConfig
from .core.exceptions import StoreError
from .core.filesystem import write_executable
from .core.locking import LockManager

logger = logging.getLogger(__name__)

ARTIFACT_PREFIX = "solc-"


def artifact_name(version: str) -> str:
    """File name of the installed artifact for a version."""
    return f"{ARTIFACT_PREFIX}{version}"


class InstallStore:
    """
    Directory-backed set of installed compiler versions.

    Attributes:
        config: solc-select configuration
        lock_manager: Lock manager guarding artifact writes
    """

    def __init__(
        self, config: SolcSelectConfig, lock_manager: Optional[LockManager] = None
    ):
        self.config = config
        self.lock_manager = lock_manager or LockManager(config.lock_dir)

    def artifact_directory(self) -> Path:
        """Canonical installation directory (computed, not created)."""
        return self.config.artifacts_dir

    def artifact_path(self, version: str) -> Path:
        return self.artifact_directory() / artifact_name(version)

    def ensure_directory(self) -> Path:
        """
        Create the installation directory if it doesn't exist.

        Raises:
            StoreError: If the directory cannot be created
        """
        directory = self.artifact_directory()
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError(
                f"Failed to create artifact directory {directory}: {e}", directory
            ) from e
        return directory

    def installed_versions(self) -> Set[str]:
        """
        List installed versions from the directory contents.

        Entries not named ``solc-<version>`` are skipped.

        Returns:
            Set of installed version identifiers

        Raises:
            StoreError: If the directory is missing or unreadable
        """
        directory = self.artifact_directory()
        try:
            entries = list(directory.iterdir())
        except FileNotFoundError as e:
            raise StoreError(
                f"Artifact directory {directory} does not exist", directory
            ) from e
        except OSError as e:
            raise StoreError(
                f"Failed to list artifact directory {directory}: {e}", directory
            ) from e

        versions = set()
        for entry in entries:
            name = entry.name
            version = name[len(ARTIFACT_PREFIX):]
            if not name.startswith(ARTIFACT_PREFIX) or not version:
                logger.debug(f"Skipping unrecognized entry in {directory}: {name}")
                continue
            versions.add(version)
        return versions

    def is_installed(self, version: str) -> bool:
        return self.artifact_path(version).is_file()

    def write_artifact(self, version: str, data: bytes) -> Path:
        """
        Persist an artifact and mark it executable.

        Overwrites any existing artifact for the same version.

        Args:
            version: Version identifier
            data: Compiler binary contents

        Returns:
            Path to the written artifact

        Raises:
            StoreError: If writing or chmod fails
            LockTimeoutError: If another process holds the artifact lock
        """
        path = self.artifact_path(version)
        with self.lock_manager.artifact_lock(version, timeout=self.config.lock_timeout):
            write_executable(path, data)
        return path


__all__ = ["ARTIFACT_PREFIX", "artifact_name", "InstallStore"]
