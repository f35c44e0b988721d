"""Metrics command - inspect character metrics read from a font file."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from math_accent.config import Config
from math_accent.exceptions import FontMetricsError
from math_accent.fonts import read_character_metrics

console = Console()


@click.command()
@click.argument("font_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--skew-char", help="Glyph name of the skew character (default from config)")
@click.option("--chars", help="Only show these characters")
@click.option("--skewed-only", is_flag=True, help="Only show characters with a non-zero skew")
@click.pass_context
def metrics(
    ctx: click.Context,
    font_file: Path,
    skew_char: str | None,
    chars: str | None,
    skewed_only: bool,
) -> None:
    """Show heights, depths, widths and skews read from a font.

    FONT_FILE: TrueType or OpenType font.
    """
    config = ctx.obj.get("config") or Config.load()

    try:
        with console.status("[bold green]Reading font..."):
            char_metrics, x_height = read_character_metrics(
                font_file, skew_char or config.skew_char
            )
    except FontMetricsError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    if chars is not None:
        code_points = [ord(c) for c in dict.fromkeys(chars)]
    else:
        code_points = sorted(char_metrics)

    precision = config.precision
    table = Table(title=f"Metrics ({font_file.name})")
    table.add_column("Char", style="cyan")
    table.add_column("Code", style="dim")
    table.add_column("Height", justify="right")
    table.add_column("Depth", justify="right")
    table.add_column("Width", justify="right")
    table.add_column("Skew", justify="right", style="yellow")

    count = 0
    missing = 0
    for code_point in code_points:
        metric = char_metrics.get(code_point)
        if metric is None:
            table.add_row(chr(code_point), f"U+{code_point:04X}", "-", "-", "-", "-")
            missing += 1
            continue
        if skewed_only and not metric.skew:
            continue
        table.add_row(
            chr(code_point),
            f"U+{code_point:04X}",
            f"{metric.height:.{precision}f}",
            f"{metric.depth:.{precision}f}",
            f"{metric.width:.{precision}f}",
            f"{metric.skew:.{precision}f}",
        )
        count += 1

    console.print(table)
    if x_height is not None:
        console.print(f"\n[bold]x-height:[/bold] {x_height:.{precision}f} em")
    else:
        console.print("\n[bold]x-height:[/bold] [dim]not in font[/dim]")
    console.print(f"[bold]Total:[/bold] {count} characters")
    if missing:
        console.print(f"[yellow]Missing:[/yellow] {missing} characters")
