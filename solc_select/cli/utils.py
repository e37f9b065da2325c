"""
Shared utilities for CLI commands.

Provides common output formatting used across CLI commands.
"""

import logging
import sys
from typing import Iterable, List, Optional

from solc_select.catalog import sort_versions_descending
from solc_select.core.exceptions import InvalidVersionError

logger = logging.getLogger(__name__)

NO_VERSIONS_INSTALLED = "<no-solc-installed>"
NO_VERSION_SELECTED = "<no-version-selected>"


def print_error(message: str, details: Optional[str] = None):
    """
    Print error message to stderr in consistent format.

    Args:
        message: Main error message
        details: Optional additional details
    """
    print(f"ERROR: {message}", file=sys.stderr)
    if details:
        print(f"  {details}", file=sys.stderr)


def print_warning(message: str):
    """Print warning message to stderr."""
    print(f"WARNING: {message}", file=sys.stderr)


def display_order(versions: Iterable[str]) -> List[str]:
    """
    Order versions newest first, falling back to plain sorting.

    Local entries may not follow the major.minor.patch form, and listing
    them should still work.
    """
    versions = list(versions)
    try:
        return sort_versions_descending(versions)
    except InvalidVersionError:
        logger.debug("Non-numeric version found, using lexical order")
        return sorted(versions, reverse=True)
