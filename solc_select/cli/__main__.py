"""
Entry point for running solc-select CLI as a module.

Usage: python -m solc_select.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
