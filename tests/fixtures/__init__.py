"""Test fixtures for solc-select tests.

- catalog: fake release host URLs, sample releases and artifact contents

The pytest fixtures built on these live in tests/conftest.py.
"""

__all__ = [
    "catalog",
]
