"""MeasureMint command-line interface package.

Supports ``python -m measuremint.cli`` as an alternative to the ``measuremint`` entry point.
"""

from measuremint.cli.main import cli, main

__all__ = ["cli", "main"]
