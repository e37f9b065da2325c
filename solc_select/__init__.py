"""
solc-select - install and switch between Solidity compiler versions.

The core reconciles the remote release catalog with the local install
store and maintains the active version pointer consulted by ``solc``.
"""

try:
    from importlib.metadata import version

    __version__ = version("solc-select")
except Exception:
    __version__ = "0.1.0"

from .catalog import fetch_catalog, sort_versions_descending
from .core.config import SolcSelectConfig, load_config
from .installer import InstallResult, Installer, install_versions
from .pointer import ActiveVersionPointer, read_active_version, write_active_version
from .store import InstallStore
from .switcher import SwitchOutcome, VersionSwitcher, switch_active

__all__ = [
    "__version__",
    "fetch_catalog",
    "sort_versions_descending",
    "SolcSelectConfig",
    "load_config",
    "InstallResult",
    "Installer",
    "install_versions",
    "ActiveVersionPointer",
    "read_active_version",
    "write_active_version",
    "InstallStore",
    "SwitchOutcome",
    "VersionSwitcher",
    "switch_active",
]
