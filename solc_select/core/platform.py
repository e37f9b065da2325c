"""
Platform resolution for solc-select.

Maps the host operating system to the platform key used by the remote
release catalog (e.g. 'linux-amd64', 'macosx-amd64'). An unsupported
operating system is a static property of the host, so it fails
immediately instead of falling back to a guess.

Usage:
    from solc_select.core.platform import resolve_platform

    key = resolve_platform()
    print(f"Catalog platform: {key}")
"""

import functools
import logging
import platform

from .exceptions import UnsupportedPlatformError

logger = logging.getLogger(__name__)

# platform.system() value -> catalog platform key
PLATFORM_KEYS = {
    "Linux": "linux-amd64",
    "Darwin": "macosx-amd64",
}


@functools.lru_cache(maxsize=1)
def resolve_platform() -> str:
    """
    Resolve the catalog platform key for the current host.

    This function is cached - it only runs detection once per process.

    Returns:
        Catalog platform key

    Raises:
        UnsupportedPlatformError: If the host OS has no catalog key

    Example:
        >>> resolve_platform()
        'linux-amd64'
    """
    system = platform.system()
    key = PLATFORM_KEYS.get(system)
    if key is None:
        raise UnsupportedPlatformError(system)

    logger.debug(f"Resolved platform {system} -> {key}")
    return key


def get_supported_platforms() -> list[str]:
    """Get list of all catalog platform keys this tool can resolve to."""
    return sorted(PLATFORM_KEYS.values())


def clear_platform_cache():
    """
    Clear the platform resolution cache.

    This forces the next call to resolve_platform() to re-detect.
    Useful for testing.
    """
    resolve_platform.cache_clear()


__all__ = [
    "PLATFORM_KEYS",
    "resolve_platform",
    "get_supported_platforms",
    "clear_platform_cache",
]
