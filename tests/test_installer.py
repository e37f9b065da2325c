"""
Unit tests for the installer.

Network access is served by ``responses`` through the mock_catalog fixture.
"""

import os
import pytest
import responses
from unittest.mock import patch

from solc_select.core.exceptions import (
    InstallError,
    InvalidVersionError,
    NetworkError,
    StoreError,
)
from solc_select.installer import ALL_VERSIONS, Installer, install_versions
from solc_select.store import InstallStore

from tests.fixtures.catalog import (
    LIST_URL,
    SAMPLE_RELEASES,
    artifact_bytes,
    artifact_url,
)


def _artifact_calls(rsps):
    return [c for c in rsps.calls if c.request.url != LIST_URL]


class TestListAvailable:
    """Tests for install([]) listing."""

    def test_descending_order(self, config, mock_catalog):
        """Test listing orders by numeric triple, newest first."""
        result = Installer(config).install([])

        assert result.available == ["0.8.10", "0.8.4", "0.7.6"]
        assert result.installed == {}

    def test_listing_does_not_download(self, config, mock_catalog):
        Installer(config).install([])

        assert _artifact_calls(mock_catalog) == []

    def test_listing_does_not_create_store(self, config, mock_catalog):
        Installer(config).install([])

        assert not config.artifacts_dir.exists()

    @responses.activate
    def test_malformed_catalog_version(self, config):
        """Test a malformed remote identifier is fatal."""
        responses.add(
            responses.GET,
            LIST_URL,
            json={"releases": {"0.8.4": "a", "nightly": "b"}},
        )

        with pytest.raises(InvalidVersionError):
            Installer(config).install([])


class TestInstall:
    """Tests for installing versions."""

    def test_install_single(self, config, mock_catalog):
        """Test installed version appears in the store and is executable."""
        result = install_versions(config, ["0.8.4"])

        store = InstallStore(config)
        path = store.artifact_path("0.8.4")
        assert result.installed == {"0.8.4": path}
        assert store.installed_versions() == {"0.8.4"}
        assert path.read_bytes() == artifact_bytes("0.8.4")
        assert os.access(path, os.X_OK)

    def test_downloads_from_platform_url(self, config, mock_catalog):
        Installer(config).install(["0.7.6"])

        assert [c.request.url for c in _artifact_calls(mock_catalog)] == [
            artifact_url("0.7.6")
        ]

    def test_install_multiple(self, config, mock_catalog):
        Installer(config).install(["0.8.4", "0.7.6"])

        assert InstallStore(config).installed_versions() == {"0.8.4", "0.7.6"}

    def test_install_all(self, config, mock_catalog):
        """Test 'all' installs every catalog release, newest first."""
        result = Installer(config).install([ALL_VERSIONS])

        assert list(result.installed) == ["0.8.10", "0.8.4", "0.7.6"]
        assert InstallStore(config).installed_versions() == set(SAMPLE_RELEASES)

    def test_all_mixed_with_versions(self, config, mock_catalog):
        result = Installer(config).install(["0.8.4", ALL_VERSIONS])

        assert set(result.installed) == set(SAMPLE_RELEASES)
        assert result.unmatched == []

    def test_creates_store_directory(self, config, mock_catalog):
        assert not config.artifacts_dir.exists()

        Installer(config).install(["0.8.4"])

        assert config.artifacts_dir.is_dir()

    def test_idempotent(self, config, mock_catalog):
        """Test reinstalling keeps membership and re-downloads."""
        installer = Installer(config)
        installer.install(["0.8.4"])
        installer.install(["0.8.4"])

        assert InstallStore(config).installed_versions() == {"0.8.4"}
        assert len(_artifact_calls(mock_catalog)) == 2

    def test_reinstall_repairs_artifact(self, config, mock_catalog):
        """Test a corrupted artifact is overwritten."""
        installer = Installer(config)
        installer.install(["0.8.4"])
        path = InstallStore(config).artifact_path("0.8.4")
        path.write_bytes(b"corrupted")

        installer.install(["0.8.4"])

        assert path.read_bytes() == artifact_bytes("0.8.4")

    def test_logs_progress(self, config, mock_catalog, caplog):
        with caplog.at_level("INFO", logger="solc_select.installer"):
            Installer(config).install(["0.8.4"])

        assert "Installing '0.8.4'..." in caplog.text
        assert "Version '0.8.4' installed." in caplog.text


class TestUnmatchedVersions:
    """Tests for requested versions the catalog doesn't have."""

    def test_unknown_version_reported(self, config, mock_catalog, caplog):
        """Test unmatched versions are collected and logged, not raised."""
        with caplog.at_level("WARNING", logger="solc_select.installer"):
            result = Installer(config).install(["9.9.9"])

        assert result.unmatched == ["9.9.9"]
        assert result.installed == {}
        assert "9.9.9" in caplog.text
        assert InstallStore(config).installed_versions() == set()

    def test_mixed_known_and_unknown(self, config, mock_catalog):
        result = Installer(config).install(["0.8.4", "9.9.9"])

        assert list(result.installed) == ["0.8.4"]
        assert result.unmatched == ["9.9.9"]


class TestInstallFailures:
    """Tests for error propagation."""

    @responses.activate
    def test_catalog_failure(self, config):
        responses.add(responses.GET, LIST_URL, status=503)

        with pytest.raises(NetworkError):
            Installer(config).install(["0.8.4"])

    @responses.activate
    def test_download_failure_wrapped(self, config):
        """Test artifact failures name the version."""
        responses.add(responses.GET, LIST_URL, json={"releases": SAMPLE_RELEASES})
        responses.add(responses.GET, artifact_url("0.8.4"), status=404)

        with pytest.raises(InstallError, match="0.8.4") as exc_info:
            Installer(config).install(["0.8.4"])

        assert exc_info.value.version == "0.8.4"
        assert isinstance(exc_info.value.__cause__, NetworkError)
        assert not InstallStore(config).artifact_path("0.8.4").exists()

    def test_write_failure_wrapped(self, config, mock_catalog):
        with patch(
            "solc_select.store.write_executable",
            side_effect=StoreError("disk full"),
        ):
            with pytest.raises(InstallError, match="disk full"):
                Installer(config).install(["0.8.4"])

    def test_store_creation_failure(self, config):
        """Test the store directory is created before any network access."""
        config.home.parent.mkdir(parents=True, exist_ok=True)
        config.home.write_text("")

        with responses.RequestsMock() as rsps:
            with pytest.raises(StoreError):
                Installer(config).install(["0.8.4"])

            assert len(rsps.calls) == 0
