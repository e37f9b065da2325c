"""
Remote release catalog client.

The catalog is a JSON document published per platform:

    GET <base_url>/<platform-key>/list.json
    {"releases": {"0.8.4": "solc-linux-amd64-v0.8.4+commit.c7e474f2", ...}}

It is fetched fresh on every call; nothing is cached between calls.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

import requests

from .core.config import SolcSelectConfig
from .core.download import get_json
from .core.exceptions import InvalidVersionError, NetworkError
from .core.platform import resolve_platform

logger = logging.getLogger(__name__)

ReleaseCatalog = Dict[str, str]


def catalog_url(config: SolcSelectConfig, platform_key: Optional[str] = None) -> str:
    """Build the URL of the catalog document for a platform."""
    platform_key = platform_key or resolve_platform()
    return f"{config.base_url}/{platform_key}/list.json"


def artifact_url(
    config: SolcSelectConfig, artifact: str, platform_key: Optional[str] = None
) -> str:
    """Build the download URL of a catalog artifact filename."""
    platform_key = platform_key or resolve_platform()
    return f"{config.base_url}/{platform_key}/{artifact}"


def fetch_catalog(
    config: SolcSelectConfig,
    platform_key: Optional[str] = None,
    session: Optional[requests.Session] = None,
) -> ReleaseCatalog:
    """
    Fetch the release catalog for the current platform.

    Args:
        config: solc-select configuration (base URL, timeout)
        platform_key: Override the resolved platform key
        session: Optional requests session

    Returns:
        Mapping of version identifier to artifact filename

    Raises:
        NetworkError: On transport failure, HTTP error, malformed JSON or a
            document without a ``releases`` mapping
        UnsupportedPlatformError: If the host platform has no catalog
    """
    url = catalog_url(config, platform_key)
    document = get_json(url, timeout=config.request_timeout, session=session)

    if not isinstance(document, dict):
        raise NetworkError(f"Catalog at {url} is not a JSON object", url)

    releases = document.get("releases")
    if not isinstance(releases, dict):
        raise NetworkError(f"Catalog at {url} has no 'releases' mapping", url)

    for version, artifact in releases.items():
        if not isinstance(artifact, str):
            raise NetworkError(
                f"Catalog at {url} has a non-string artifact for {version}", url
            )

    logger.debug(f"Catalog at {url} lists {len(releases)} releases")
    return dict(releases)


def parse_version(version: str) -> Tuple[int, int, int]:
    """
    Split a version identifier into a (major, minor, patch) triple.

    Only used for display ordering; identifiers are otherwise opaque.

    Args:
        version: Identifier such as "0.8.4"

    Returns:
        Tuple of (major, minor, patch)

    Raises:
        InvalidVersionError: Unless the identifier is exactly three
            dot-separated non-negative integers
    """
    parts = version.split(".")
    if len(parts) != 3 or not all(p.isascii() and p.isdigit() for p in parts):
        raise InvalidVersionError(
            f"Invalid version format: {version!r}. Expected major.minor.patch"
        )

    major, minor, patch = (int(part) for part in parts)
    return major, minor, patch


def sort_versions_descending(versions: Iterable[str]) -> List[str]:
    """
    Order version identifiers newest first by numeric triple.

    Example:
        >>> sort_versions_descending(["0.8.4", "0.8.10", "0.7.6"])
        ['0.8.10', '0.8.4', '0.7.6']
    """
    return sorted(versions, key=parse_version, reverse=True)


__all__ = [
    "ReleaseCatalog",
    "catalog_url",
    "artifact_url",
    "fetch_catalog",
    "parse_version",
    "sort_versions_descending",
]
