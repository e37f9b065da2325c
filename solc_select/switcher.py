"""
Active version switching.

Resolution order:
    1. Installed locally -> write the pointer (no network access)
    2. Listed in the remote catalog -> must be installed first
    3. Otherwise -> unknown version

The pointer is only written in the first case, so it never names a
version that was not installed at write time.
"""

import enum
import logging
from typing import Optional

import requests

from .catalog import fetch_catalog
from .core.config import SolcSelectConfig
from .core.exceptions import StoreError
from .pointer import ActiveVersionPointer
from .store import InstallStore

logger = logging.getLogger(__name__)


class SwitchOutcome(enum.Enum):
    """Result of a switch request."""

    SWITCHED = "switched"
    NOT_INSTALLED = "not-installed"
    UNKNOWN = "unknown"


class VersionSwitcher:
    """Validates a version and updates the active version pointer."""

    def __init__(
        self,
        config: SolcSelectConfig,
        store: Optional[InstallStore] = None,
        pointer: Optional[ActiveVersionPointer] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config
        self.store = store or InstallStore(config)
        self.pointer = pointer or ActiveVersionPointer(config)
        self.session = session

    def _installed(self) -> set:
        try:
            return self.store.installed_versions()
        except StoreError:
            if self.store.artifact_directory().exists():
                raise
            # Nothing has been installed yet
            return set()

    def switch_active(self, version: str) -> SwitchOutcome:
        """
        Make ``version`` the active compiler if it is installed.

        Args:
            version: Version identifier

        Returns:
            SwitchOutcome

        Raises:
            StoreError: If the store or pointer cannot be accessed
            NetworkError: If the catalog has to be consulted and can't be fetched
        """
        if version in self._installed():
            self.pointer.write(version)
            logger.debug(f"Switched global version to {version}")
            return SwitchOutcome.SWITCHED

        catalog = fetch_catalog(self.config, session=self.session)
        if version in catalog:
            return SwitchOutcome.NOT_INSTALLED

        return SwitchOutcome.UNKNOWN


def switch_active(config: SolcSelectConfig, version: str) -> SwitchOutcome:
    """Convenience wrapper around :meth:`VersionSwitcher.switch_active`."""
    return VersionSwitcher(config).switch_active(version)


__all__ = ["SwitchOutcome", "VersionSwitcher", "switch_active"]
