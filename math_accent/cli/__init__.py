"""Command-line interface for math-accent."""

from math_accent.cli.main import cli

__all__ = ["cli"]
