"""
Install command implementation.

Lists versions available to install, or installs the requested ones.
"""

import logging

from solc_select.cli.utils import print_warning
from solc_select.core.config import SolcSelectConfig
from solc_select.installer import Installer

logger = logging.getLogger(__name__)


def run(args, config: SolcSelectConfig) -> int:
    """
    Run the install command.

    Args:
        args: Parsed command-line arguments with ``versions``
        config: solc-select configuration

    Returns:
        Exit code (0 for success)
    """
    logger.debug(f"Arguments: {args}")

    result = Installer(config).install(args.versions)

    if not args.versions:
        print("Available versions to install:")
        for version in result.available:
            print(version)
        return 0

    for version in result.unmatched:
        print_warning(f"Unknown version '{version}', nothing installed for it")

    if not result.installed:
        print("No versions were installed")

    return 0
