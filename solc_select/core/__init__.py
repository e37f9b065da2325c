"""
Core functionality for solc-select.

This package contains the foundational modules that other components depend on.
"""

from .config import (
    SolcSelectConfig,
    load_config,
    get_default_home,
)

from .locking import LockManager

from .platform import (
    resolve_platform,
    get_supported_platforms,
    clear_platform_cache,
)

from .exceptions import (
    SolcSelectError,
    NetworkError,
    StoreError,
    NoActiveVersionError,
    LockTimeoutError,
    ConfigError,
    UnsupportedPlatformError,
    InstallError,
    InvalidVersionError,
)

__all__ = [
    "SolcSelectConfig",
    "load_config",
    "get_default_home",
    "LockManager",
    "resolve_platform",
    "get_supported_platforms",
    "clear_platform_cache",
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
