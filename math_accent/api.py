"""High-level rendering API.

Example:
    >>> from math_accent import AccentRenderer
    >>> renderer = AccentRenderer()
    >>> result = renderer.render_file("formula.xml")
    >>> result.markup
    '<math xmlns="http://www.w3.org/1998/Math/MathML">...'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from math_accent.config import Config
from math_accent.exceptions import MathAccentError
from math_accent.fonts import DEFAULT_METRICS, MetricsTable, load_font_metrics
from math_accent.layout import Box, Options, build_html
from math_accent.markup import build_mathml
from math_accent.tree import Node
from math_accent.tree.loader import load_expression

logger = logging.getLogger("math_accent")


@dataclass
class RenderResult:
    """Outcome of rendering one expression."""

    success: bool
    box: Box | None = None
    markup: str | None = None
    errors: list[str] = field(default_factory=list)

    def box_dict(self, precision: int = 5) -> dict | None:
        return self.box.to_dict(precision) if self.box is not None else None


class AccentRenderer:
    """Render parse trees to a visual box tree and to MathML.

    Fonts named in the configuration are read once, when the renderer is
    created, and overlaid on the built-in metrics.

    Args:
        config: Settings; loaded from the environment when omitted.
        log_level: Overrides ``config.log_level``. Recorded for callers only;
            handlers and levels are set up by the application.

    Raises:
        FontMetricsError: If a configured font cannot be read.
    """

    def __init__(self, config: Config | None = None, log_level: str | None = None) -> None:
        self.config = config or Config.load()
        self.log_level = (log_level or self.config.log_level).upper()
        self.metrics = self._load_metrics()

    def _load_metrics(self) -> MetricsTable:
        metrics = DEFAULT_METRICS
        for font_name, font_path in self.config.fonts.items():
            logger.info("Loading metrics for %s from %s", font_name, font_path)
            metrics = load_font_metrics(
                font_path,
                font_name=font_name,
                skew_char=self.config.skew_char,
                base=metrics,
            )
        return metrics

    @property
    def options(self) -> Options:
        return Options(metrics=self.metrics)

    def render_html(self, node: Node) -> RenderResult:
        """Lay out ``node`` as a box tree."""
        try:
            box = build_html(node, self.options)
        except MathAccentError as e:
            logger.error("Layout failed: %s", e)
            return RenderResult(success=False, errors=[str(e)])
        return RenderResult(success=True, box=box)

    def render_mathml(self, node: Node) -> RenderResult:
        """Build the MathML markup of ``node``."""
        try:
            markup = build_mathml(node).to_markup()
        except MathAccentError as e:
            logger.error("MathML build failed: %s", e)
            return RenderResult(success=False, errors=[str(e)])
        return RenderResult(success=True, markup=markup)

    def render(self, node: Node) -> RenderResult:
        """Both renderings of ``node``; errors from either are collected."""
        html = self.render_html(node)
        mathml = self.render_mathml(node)
        return RenderResult(
            success=html.success and mathml.success,
            box=html.box,
            markup=mathml.markup,
            errors=html.errors + mathml.errors,
        )

    def render_file(self, path: Path | str) -> RenderResult:
        """Load an expression document and render it both ways."""
        path = Path(path)
        try:
            node = load_expression(path)
        except (MathAccentError, FileNotFoundError) as e:
            logger.error("Cannot load %s: %s", path, e)
            return RenderResult(success=False, errors=[str(e)])
        logger.info("Rendering %s", path)
        return self.render(node)
