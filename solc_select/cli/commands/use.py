"""
Use command implementation.

Changes the globally active solc version.
"""

import logging

from solc_select.core.config import SolcSelectConfig
from solc_select.switcher import SwitchOutcome, VersionSwitcher

logger = logging.getLogger(__name__)


def run(args, config: SolcSelectConfig) -> int:
    """
    Run the use command.

    "Not installed" and "unknown" are reported as regular output, not as
    errors.

    Args:
        args: Parsed command-line arguments with ``version``
        config: solc-select configuration

    Returns:
        Exit code (0 for success)
    """
    version = args.version
    outcome = VersionSwitcher(config).switch_active(version)

    if outcome is SwitchOutcome.SWITCHED:
        print(f"Switched global version to {version}")
    elif outcome is SwitchOutcome.NOT_INSTALLED:
        print(
            f"You need to install '{version}' prior to using it. "
            f"Use `solc-select install {version}`"
        )
    else:
        print(f"Unknown version `{version}`")

    return 0
