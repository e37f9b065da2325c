"""
``solc`` dispatcher executable.

Reads the active version, locates its installed artifact and replaces the
current process with it, forwarding every argument.

Usage: solc [solc arguments...]
"""

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .core.config import SolcSelectConfig, load_config
from .core.exceptions import SolcSelectError, StoreError
from .core.filesystem import is_executable
from .pointer import ActiveVersionPointer
from .store import InstallStore

logger = logging.getLogger(__name__)


def resolve_active_executable(config: SolcSelectConfig) -> Path:
    """
    Locate the compiler binary for the active version.

    Args:
        config: solc-select configuration

    Returns:
        Path to the installed artifact

    Raises:
        NoActiveVersionError: If no version has been selected
        StoreError: If the selected version is missing or not executable
    """
    version = ActiveVersionPointer(config).read()
    store = InstallStore(config)
    path = store.artifact_path(version)

    if not store.is_installed(version):
        raise StoreError(
            f"Active version {version} is not installed ({path} missing). "
            f"Run `solc-select install {version}` or `solc-select use <VERSION>`.",
            path,
        )
    if not is_executable(path):
        raise StoreError(
            f"Active version {version} at {path} is not executable. "
            f"Reinstall it with `solc-select install {version}`.",
            path,
        )
    return path


def main(argv: Optional[List[str]] = None):
    """Main entry point for the ``solc`` dispatcher."""
    args = sys.argv[1:] if argv is None else argv

    try:
        executable = resolve_active_executable(load_config())
    except SolcSelectError as e:
        print(f"solc-select: {e}", file=sys.stderr)
        sys.exit(1)

    logger.debug(f"Executing {executable}")
    try:
        os.execv(executable, [str(executable), *args])
    except OSError as e:
        print(f"solc-select: failed to execute {executable}: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
