"""Read character metrics out of a real font file with fontTools.

Heights, depths and widths come from glyph bounds and advance widths, the
x-height from the OS/2 table, and each glyph's skew from a legacy ``kern``
pair between the glyph and the font's skew character. Everything is scaled
to ems by ``unitsPerEm``.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from fontTools.pens.boundsPen import BoundsPen
from fontTools.ttLib import TTFont, TTLibError

from math_accent.exceptions import FontMetricsError
from math_accent.fonts.metrics import DEFAULT_METRICS, CharacterMetrics, FontMetrics, MetricsTable

logger = logging.getLogger(__name__)


def _open_font(font: TTFont | Path | str) -> TTFont:
    if isinstance(font, TTFont):
        return font
    path = Path(font)
    if not path.exists():
        raise FontMetricsError(f"Font file not found: {path}", details={"path": str(path)})
    try:
        return TTFont(str(path), lazy=True)
    except (TTLibError, OSError) as e:
        raise FontMetricsError(f"Cannot read font {path}: {e}", details={"path": str(path)}) from e


def _skew_kerns(tt_font: TTFont, skew_char: str) -> dict[str, int]:
    """Kern of every glyph against ``skew_char`` from the legacy kern table."""
    kerns: dict[str, int] = {}
    if "kern" not in tt_font:
        return kerns
    for subtable in getattr(tt_font["kern"], "kernTables", []):
        pairs = getattr(subtable, "kernTable", None) or {}
        for (left, right), value in pairs.items():
            if right == skew_char:
                kerns[left] = value
    return kerns


def read_character_metrics(
    font: TTFont | Path | str, skew_char: str = "skewchar"
) -> tuple[dict[int, CharacterMetrics], float | None]:
    """Character metrics of every mapped glyph, plus the x-height if known.

    Returns:
        Tuple of (code point -> metrics, x-height in ems or None).
    """
    tt_font = _open_font(font)
    units_per_em = tt_font["head"].unitsPerEm
    cmap = tt_font.getBestCmap() or {}
    glyph_set = tt_font.getGlyphSet()
    hmtx = tt_font["hmtx"]
    skews = _skew_kerns(tt_font, skew_char)

    chars: dict[int, CharacterMetrics] = {}
    for code_point, glyph_name in cmap.items():
        if glyph_name not in glyph_set:
            continue
        pen = BoundsPen(glyph_set)
        glyph_set[glyph_name].draw(pen)
        _x_min, y_min, _x_max, y_max = pen.bounds or (0, 0, 0, 0)
        advance, _lsb = hmtx[glyph_name]
        chars[code_point] = CharacterMetrics(
            depth=max(0.0, -y_min / units_per_em),
            height=max(0.0, y_max / units_per_em),
            italic=0.0,
            skew=skews.get(glyph_name, 0) / units_per_em,
            width=advance / units_per_em,
        )

    x_height = None
    if "OS/2" in tt_font:
        os2 = tt_font["OS/2"]
        if getattr(os2, "version", 0) >= 2 and getattr(os2, "sxHeight", 0):
            x_height = os2.sxHeight / units_per_em

    logger.debug(
        "Read %d characters (%d with skew) at %d units/em",
        len(chars),
        sum(1 for m in chars.values() if m.skew),
        units_per_em,
    )
    return chars, x_height


def load_font_metrics(
    font: TTFont | Path | str,
    font_name: str = "Math-Italic",
    skew_char: str = "skewchar",
    base: MetricsTable = DEFAULT_METRICS,
) -> MetricsTable:
    """Overlay the metrics of ``font`` on ``base`` under ``font_name``.

    Raises:
        FontMetricsError: If the font cannot be opened.
    """
    chars, x_height = read_character_metrics(font, skew_char)
    font_metrics = base.font_metrics()
    if x_height is not None:
        font_metrics = replace(font_metrics, x_height=x_height)
    logger.info("Loaded %d glyph metrics into %s", len(chars), font_name)
    return base.with_font(font_name, chars, font_metrics)
