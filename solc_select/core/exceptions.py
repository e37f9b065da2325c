"""
Centralized exception hierarchy for solc-select.

Library code raises these; only the CLI layer decides whether a failure
is fatal. Every message names what failed and against which path or URL.
"""

from pathlib import Path
from typing import Optional, Union


# ============================================================================
# Base Exceptions
# ============================================================================


class SolcSelectError(Exception):
    """Base exception for all solc-select errors."""

    pass


# ============================================================================
# Network Exceptions
# ============================================================================


class NetworkError(SolcSelectError):
    """Raised on transport, HTTP status or response parsing failures."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(message)


# ============================================================================
# Filesystem Exceptions
# ============================================================================


class StoreError(SolcSelectError):
    """Raised when a filesystem read, write or permission change fails."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class NoActiveVersionError(StoreError):
    """Raised when no version has ever been selected."""

    def __init__(self, path: Union[str, Path]):
        super().__init__(f"No active solc version selected ({path} not found)", path)


class LockTimeoutError(StoreError):
    """Raised when an advisory lock cannot be acquired within timeout."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(SolcSelectError):
    """Raised for invalid configuration or an unusable home directory."""

    pass


class UnsupportedPlatformError(ConfigError):
    """Raised when the host operating system has no catalog platform key."""

    def __init__(self, system: str):
        self.system = system
        super().__init__(f"Unsupported platform: {system or 'unknown'}")


# ============================================================================
# Install / Version Exceptions
# ============================================================================


class InstallError(SolcSelectError):
    """Raised when installing a specific version fails."""

    def __init__(self, version: str, reason: str):
        self.version = version
        super().__init__(f"Failed to install solc {version}: {reason}")


class InvalidVersionError(SolcSelectError):
    """Raised when a version identifier is not a major.minor.patch triple."""

    pass


__all__ = [
    "SolcSelectError",
    "NetworkError",
    "StoreError",
    "NoActiveVersionError",
    "LockTimeoutError",
    "ConfigError",
    "UnsupportedPlatformError",
    "InstallError",
    "InvalidVersionError",
]
