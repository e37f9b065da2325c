"""
Versions command implementation.

Prints every installed solc version.
"""

import logging

from solc_select.cli.utils import NO_VERSIONS_INSTALLED, display_order
from solc_select.core.config import SolcSelectConfig
from solc_select.core.exceptions import StoreError
from solc_select.store import InstallStore

logger = logging.getLogger(__name__)


def run(args, config: SolcSelectConfig) -> int:
    """
    Run the versions command.

    Args:
        args: Parsed command-line arguments
        config: solc-select configuration

    Returns:
        Exit code (0 for success)
    """
    try:
        installed = InstallStore(config).installed_versions()
    except StoreError as e:
        logger.debug(f"No installed versions: {e}")
        installed = set()

    if not installed:
        print(NO_VERSIONS_INSTALLED)
        return 0

    for version in display_order(installed):
        print(version)
    return 0
