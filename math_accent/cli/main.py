"""Entry point of the ``math-accent`` command."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from math_accent import __version__
from math_accent.cli.commands import accents, metrics, render
from math_accent.config import LOG_LEVELS, Config
from math_accent.exceptions import ConfigError

console = Console(stderr=True)


def setup_logging(level: str) -> None:
    """Route package logs through rich at ``level``."""
    logger = logging.getLogger("math_accent")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False))


@click.group()
@click.version_option(__version__, prog_name="math-accent")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML configuration file",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (overrides the config file)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    """Lay out TeX accents as boxes and MathML."""
    ctx.ensure_object(dict)
    try:
        config = Config.load(config_path)
    except (ConfigError, FileNotFoundError) as e:
        console.print(f"[red]Config error:[/red] {e}")
        raise SystemExit(1) from e

    level = (log_level or config.log_level).upper()
    setup_logging(level)
    ctx.obj["config"] = config
    ctx.obj["log_level"] = level


cli.add_command(render)
cli.add_command(accents)
cli.add_command(metrics)


if __name__ == "__main__":
    cli()
