"""
solc-select CLI argument parser.

This module implements the command-line interface for solc-select using argparse.
"""

import argparse
import importlib
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from solc_select import __version__
from solc_select.core.config import load_config
from solc_select.core.exceptions import SolcSelectError
from solc_select.cli.utils import print_error

logger = logging.getLogger(__name__)


class CLI:
    """solc-select command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="solc-select",
            description=(
                "Allows users to install and quickly switch between "
                "Solidity compiler versions"
            ),
            epilog='Use "solc-select COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"solc-select {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--home",
            type=Path,
            metavar="PATH",
            help="Configuration root (default: $SOLC_SELECT_HOME or ~/.solc-select)",
        )

        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_install_command(subparsers)
        self._add_use_command(subparsers)
        self._add_versions_command(subparsers)
        self._add_current_command(subparsers)

        return parser

    def _add_install_command(self, subparsers):
        """Add 'install' subcommand."""
        parser = subparsers.add_parser(
            "install",
            help="List and install available solc versions",
            description=(
                "Without arguments, list versions available to install. "
                "Otherwise install the given versions, or every version with 'all'."
            ),
        )
        parser.add_argument(
            "versions",
            nargs="*",
            metavar="VERSION",
            help='Specific versions you want to install ("0.8.4") or "all"',
        )

    def _add_use_command(self, subparsers):
        """Add 'use' subcommand."""
        parser = subparsers.add_parser(
            "use",
            help="Change the version of global solc compiler",
            description="Change the version of global solc compiler",
        )
        parser.add_argument(
            "version",
            metavar="VERSION",
            help="solc version you want to use (eg: 0.8.4)",
        )

    def _add_versions_command(self, subparsers):
        """Add 'versions' subcommand."""
        subparsers.add_parser(
            "versions",
            help="Print out all installed solc versions",
            description="Print out all installed solc versions",
        )

    def _add_current_command(self, subparsers):
        """Add 'current' subcommand."""
        subparsers.add_parser(
            "current",
            help="Print out the active solc version",
            description="Print out the active solc version",
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except SolcSelectError as e:
            print_error(str(e))
            if parsed_args.verbose:
                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        command_map = {
            "install": "solc_select.cli.commands.install",
            "use": "solc_select.cli.commands.use",
            "versions": "solc_select.cli.commands.versions",
            "current": "solc_select.cli.commands.current",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        config = load_config(args.home)
        return module.run(args, config)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
