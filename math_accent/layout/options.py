"""Layout options threaded through every build call."""

from __future__ import annotations

from dataclasses import dataclass, replace

from math_accent.fonts.metrics import DEFAULT_METRICS, FontMetrics, MetricsTable
from math_accent.layout.style import TEXT, Style


@dataclass(frozen=True)
class Options:
    """Immutable layout state: current style, color and metrics table."""

    style: Style = TEXT
    color: str | None = None
    metrics: MetricsTable = DEFAULT_METRICS

    @property
    def size_multiplier(self) -> float:
        return self.style.size_multiplier

    def having_style(self, style: Style) -> Options:
        if style == self.style:
            return self
        return replace(self, style=style)

    def having_cramped_style(self) -> Options:
        return self.having_style(self.style.cramp())

    def with_color(self, color: str) -> Options:
        return replace(self, color=color)

    def font_metrics(self) -> FontMetrics:
        return self.metrics.font_metrics()
