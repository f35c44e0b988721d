"""CLI commands for math-accent."""

from math_accent.cli.commands.render import render
from math_accent.cli.commands.accents import accents
from math_accent.cli.commands.metrics import metrics

__all__ = ["render", "accents", "metrics"]
