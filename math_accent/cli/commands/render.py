"""Render command - lay out one expression document."""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import cast

import click
from rich.console import Console
from rich.tree import Tree

from math_accent import AccentRenderer
from math_accent.config import Config
from math_accent.exceptions import FontMetricsError
from math_accent.layout import Box

console = Console()


def box_tree(box: Box, tree: Tree | None = None, precision: int = 5) -> Tree:
    """Rich tree of a box and its descendants."""
    classes = " ".join(box.classes) or "-"
    label = (
        f"[cyan]{box.kind}[/cyan] [green]{classes}[/green] "
        f"h={box.height:.{precision}g} d={box.depth:.{precision}g} w={box.width:.{precision}g}"
    )
    text = getattr(box, "text", None)
    if text:
        label += f" [yellow]{text!r}[/yellow]"
    if box.style:
        label += " [dim]" + "; ".join(f"{k}: {v}" for k, v in box.style.items()) + "[/dim]"

    node = tree.add(label) if tree is not None else Tree(label)
    for child in getattr(box, "children", []):
        # vlist rows wrap their element
        elem = getattr(child, "elem", child)
        box_tree(elem, node, precision)
    return node


@click.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(["json", "tree", "mathml"]),
    default="tree",
    help="Output format",
)
@click.option("-o", "--output", type=click.Path(path_type=Path), help="Write output to a file")
@click.pass_context
def render(ctx: click.Context, input_file: Path, output_format: str, output: Path | None) -> None:
    """Render an expression document.

    INPUT_FILE: XML expression document.
    """
    config = ctx.obj.get("config") or Config.load()
    log_level = ctx.obj.get("log_level", config.log_level)

    try:
        renderer = AccentRenderer(config=config, log_level=log_level)
    except FontMetricsError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    result = renderer.render_file(input_file)
    if not result.success:
        for error in result.errors:
            console.print(f"[red]Error:[/red] {error}")
        raise SystemExit(1)

    if output_format == "mathml":
        text = result.markup or ""
    elif output_format == "json":
        text = json.dumps(
            {"box": result.box_dict(config.precision), "mathml": result.markup},
            indent=2,
            ensure_ascii=False,
        )
    else:
        tree = box_tree(cast(Box, result.box), precision=config.precision)
        if output is None:
            console.print(tree)
            return
        # Files get plain text whatever the terminal supports
        buffer = io.StringIO()
        Console(file=buffer, color_system=None, width=console.width).print(tree)
        text = buffer.getvalue()

    if output is not None:
        output.write_text(text, encoding="utf-8")
        console.print(f"[green]Wrote[/green] {output}")
    else:
        click.echo(text)
