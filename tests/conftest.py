"""
Pytest configuration and shared fixtures for solc-select tests.
"""

import logging
import pytest
import responses
import tempfile
from pathlib import Path
from typing import Generator
from unittest.mock import patch

from solc_select.core.config import SolcSelectConfig
from solc_select.core.platform import clear_platform_cache

from tests.fixtures.catalog import (
    BASE_URL,
    LIST_URL,
    SAMPLE_RELEASES,
    artifact_bytes,
    artifact_url,
)


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that require network access",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires --integration)",
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def isolated_home(temp_dir: Path, monkeypatch) -> Path:
    """Create isolated home directory with no solc-select overrides."""
    fake_home = temp_dir / "home"
    fake_home.mkdir()

    monkeypatch.setenv("HOME", str(fake_home))
    monkeypatch.delenv("SOLC_SELECT_HOME", raising=False)
    monkeypatch.delenv("SOLC_SELECT_BASE_URL", raising=False)
    monkeypatch.delenv("SOLC_SELECT_TIMEOUT", raising=False)

    return fake_home


@pytest.fixture
def solc_home(tmp_path) -> Path:
    """Configuration root for a test (not created)."""
    return tmp_path / ".solc-select"


@pytest.fixture
def config(solc_home: Path) -> SolcSelectConfig:
    """Configuration pointing at a temporary root and a fake release host."""
    return SolcSelectConfig(
        home=solc_home,
        base_url=BASE_URL,
        request_timeout=5,
        download_retries=1,
        lock_timeout=1,
    )


@pytest.fixture
def mock_catalog():
    """
    Serve SAMPLE_RELEASES and their artifacts from the fake release host.

    Yields the active ``responses.RequestsMock`` so tests can inspect calls
    or register more URLs.
    """
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        rsps.add(responses.GET, LIST_URL, json={"releases": SAMPLE_RELEASES})
        for version in SAMPLE_RELEASES:
            rsps.add(responses.GET, artifact_url(version), body=artifact_bytes(version))
        yield rsps


@pytest.fixture(autouse=True)
def linux_host():
    """Pretend every test runs on Linux so platform keys are stable."""
    clear_platform_cache()
    with patch("solc_select.core.platform.platform.system", return_value="Linux"):
        yield
    clear_platform_cache()


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo logging.basicConfig(force=True) done by CLI runs."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
