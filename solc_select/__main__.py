"""
Entry point for running solc-select as a module.

Usage: python -m solc_select [command] [options]
"""

from solc_select.cli.parser import main

if __name__ == "__main__":
    main()
