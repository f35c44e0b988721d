"""Font metrics for math-accent.

This subpackage provides:
- Built-in metrics for the Main-Regular and Math-Italic fonts
- A read-only metrics table with per-font overlays
- Loading metrics from TrueType/OpenType files via fontTools
"""

from math_accent.fonts.metrics import (
    DEFAULT_METRICS,
    CharacterMetrics,
    FontMetrics,
    MetricsTable,
)
from math_accent.fonts.loader import load_font_metrics, read_character_metrics

__all__ = [
    "DEFAULT_METRICS",
    "CharacterMetrics",
    "FontMetrics",
    "MetricsTable",
    "load_font_metrics",
    "read_character_metrics",
]
