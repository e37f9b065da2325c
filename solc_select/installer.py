"""
Compiler installation orchestration.

Reconciles the remote release catalog with the local install store:
lists what can be installed, or downloads the requested versions and
writes them into the store. Reinstalling a version always re-downloads
and overwrites it, which doubles as a repair mechanism.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import requests

from .catalog import (
    ReleaseCatalog,
    artifact_url,
    fetch_catalog,
    sort_versions_descending,
)
from .core.config import SolcSelectConfig
from .core.download import download_bytes
from .core.exceptions import InstallError, InvalidVersionError, SolcSelectError
from .core.platform import resolve_platform
from .store import InstallStore

logger = logging.getLogger(__name__)

# Requesting this identifier installs every catalog release
ALL_VERSIONS = "all"


@dataclass
class InstallResult:
    """
    Result of an install request.

    Attributes:
        available: Catalog versions, newest first (only filled when listing)
        installed: Installed version -> artifact path
        unmatched: Requested versions that the catalog does not contain
    """

    available: List[str] = field(default_factory=list)
    installed: Dict[str, Path] = field(default_factory=dict)
    unmatched: List[str] = field(default_factory=list)


class Installer:
    """
    Installs compiler releases into the local store.

    Example:
        >>> installer = Installer(load_config())
        >>> result = installer.install(["0.8.4"])
        >>> result.installed
        {'0.8.4': PosixPath('/home/user/.solc-select/artifacts/solc-0.8.4')}
    """

    def __init__(
        self,
        config: SolcSelectConfig,
        store: Optional[InstallStore] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config
        self.store = store or InstallStore(config)
        self.session = session

    def list_available(self) -> List[str]:
        """
        Fetch the catalog and order its versions newest first.

        Raises:
            NetworkError: If the catalog cannot be fetched
            InvalidVersionError: If the catalog holds a malformed identifier
        """
        catalog = fetch_catalog(self.config, session=self.session)
        return sort_versions_descending(catalog)

    def install(self, requested: Sequence[str]) -> InstallResult:
        """
        List or install compiler versions.

        Args:
            requested: Version identifiers to install, or ``["all"]``.
                Empty means "list what is available".

        Returns:
            InstallResult describing what happened

        Raises:
            NetworkError: If the catalog cannot be fetched
            StoreError: If the store directory cannot be created
            InstallError: If downloading or writing a version fails
        """
        if not requested:
            return InstallResult(available=self.list_available())

        self.store.ensure_directory()
        platform_key = resolve_platform()
        catalog = fetch_catalog(self.config, platform_key, session=self.session)

        selected = self._select(catalog, requested)
        result = InstallResult(
            unmatched=[
                v for v in requested if v != ALL_VERSIONS and v not in catalog
            ]
        )
        for version in result.unmatched:
            logger.warning(f"Version '{version}' is not available for {platform_key}")

        for version in selected:
            result.installed[version] = self._install_one(
                version, catalog[version], platform_key
            )

        return result

    def _select(self, catalog: ReleaseCatalog, requested: Sequence[str]) -> List[str]:
        if ALL_VERSIONS in requested:
            wanted = list(catalog)
        else:
            wanted = [v for v in catalog if v in requested]

        try:
            return sort_versions_descending(wanted)
        except InvalidVersionError:
            # Ordering is cosmetic here; keep catalog order
            return wanted

    def _install_one(self, version: str, artifact: str, platform_key: str) -> Path:
        logger.info(f"Installing '{version}'...")

        url = artifact_url(self.config, artifact, platform_key)
        try:
            data = download_bytes(
                url,
                timeout=self.config.request_timeout,
                max_retries=self.config.download_retries,
                session=self.session,
            )
            path = self.store.write_artifact(version, data)
        except SolcSelectError as e:
            raise InstallError(version, str(e)) from e

        logger.info(f"Version '{version}' installed.")
        return path


def install_versions(
    config: SolcSelectConfig, requested: Sequence[str]
) -> InstallResult:
    """Convenience wrapper around :meth:`Installer.install`."""
    return Installer(config).install(requested)


__all__ = ["ALL_VERSIONS", "InstallResult", "Installer", "install_versions"]
