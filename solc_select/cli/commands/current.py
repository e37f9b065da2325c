"""
Current command implementation.

Prints the globally active solc version.
"""

from solc_select.cli.utils import NO_VERSION_SELECTED
from solc_select.core.config import SolcSelectConfig
from solc_select.pointer import ActiveVersionPointer


def run(args, config: SolcSelectConfig) -> int:
    version = ActiveVersionPointer(config).read_or_none()
    print(version or NO_VERSION_SELECTED)
    return 0
