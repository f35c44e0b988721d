"""Accents command - list the known accent commands."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from math_accent.accents import ACCENTS, FULL_ACCENT_LABEL

console = Console()


@click.command()
@click.option("--mode", type=click.Choice(["math", "text"]), help="Only accents legal in this mode")
@click.option("--stretchy/--fixed", default=None, help="Only stretchy or only fixed accents")
def accents(mode: str | None, stretchy: bool | None) -> None:
    """List accent commands and how they are laid out."""
    table = Table(title="Accents")
    table.add_column("Label", style="cyan")
    table.add_column("Glyph", style="yellow")
    table.add_column("Mode", style="green")
    table.add_column("Stretchy")
    table.add_column("Shifty")

    count = 0
    for label, kind in sorted(ACCENTS.items()):
        if mode and kind.mode != mode:
            continue
        if stretchy is not None and kind.is_stretchy != stretchy:
            continue
        note = " (full)" if label == FULL_ACCENT_LABEL else ""
        table.add_row(
            label + note,
            kind.char,
            kind.mode,
            "yes" if kind.is_stretchy else "no",
            "yes" if kind.is_shifty else "no",
        )
        count += 1

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {count} accents")
