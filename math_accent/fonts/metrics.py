"""Font metrics used by the layout engine.

All lengths are in ems of the current font size. Character tables map a
code point to ``(depth, height, italic, skew, width)``; ``skew`` is the kern
between the character and the font's skew character.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class FontMetrics:
    """Font-wide parameters (TeX's fontdimens)."""

    x_height: float = 0.431
    quad: float = 1.0
    sup1: float = 0.413
    sup2: float = 0.363
    sup3: float = 0.289
    sub1: float = 0.15
    sub2: float = 0.247
    sup_drop: float = 0.386
    sub_drop: float = 0.05
    axis_height: float = 0.25
    default_rule_thickness: float = 0.04
    pt_per_em: float = 10.0


@dataclass(frozen=True)
class CharacterMetrics:
    depth: float
    height: float
    italic: float
    skew: float
    width: float


def _table(rows: Mapping[str, tuple[float, float, float, float, float]]) -> dict[int, CharacterMetrics]:
    return {ord(char): CharacterMetrics(*values) for char, values in rows.items()}


_DIGIT = (0.0, 0.64444, 0.0, 0.0, 0.5)

MAIN_REGULAR = _table(
    {
        # accent glyphs
        "ˊ": (0.0, 0.69444, 0.0, 0.0, 0.5),
        "ˋ": (0.0, 0.69444, 0.0, 0.0, 0.5),
        "¨": (0.0, 0.66786, 0.0, 0.0, 0.5),
        "˜": (0.0, 0.66786, 0.0, 0.0, 0.5),
        "ˉ": (0.0, 0.56778, 0.0, 0.0, 0.5),
        "˘": (0.0, 0.69444, 0.0, 0.0, 0.5),
        "ˇ": (0.0, 0.62847, 0.0, 0.0, 0.5),
        "ˆ": (0.0, 0.69444, 0.0, 0.0, 0.5),
        "˙": (0.0, 0.66786, 0.0, 0.0, 0.27778),
        "˚": (0.0, 0.69444, 0.0, 0.0, 0.75),
        "˝": (0.0, 0.69444, 0.0, 0.0, 0.5),
        "◯": (0.19444, 0.69444, 0.0, 0.0, 1.0),
        **{digit: _DIGIT for digit in "0123456789"},
        "+": (0.08333, 0.58333, 0.0, 0.0, 0.77778),
        "−": (0.08333, 0.58333, 0.0, 0.0, 0.77778),
        "=": (-0.13313, 0.36687, 0.0, 0.0, 0.77778),
        "(": (0.25, 0.75, 0.0, 0.0, 0.38889),
        ")": (0.25, 0.75, 0.0, 0.0, 0.38889),
        ",": (0.19444, 0.10556, 0.0, 0.0, 0.27778),
        "a": (0.0, 0.43056, 0.0, 0.0, 0.5),
        "b": (0.0, 0.69444, 0.0, 0.0, 0.55556),
        "c": (0.0, 0.43056, 0.0, 0.0, 0.44445),
        "d": (0.0, 0.69444, 0.0, 0.0, 0.55556),
        "e": (0.0, 0.43056, 0.0, 0.0, 0.44445),
        "f": (0.0, 0.69444, 0.07778, 0.0, 0.30556),
        "g": (0.19444, 0.43056, 0.01389, 0.0, 0.5),
        "h": (0.0, 0.69444, 0.0, 0.0, 0.55556),
        "i": (0.0, 0.66786, 0.0, 0.0, 0.27778),
        "n": (0.0, 0.43056, 0.0, 0.0, 0.55556),
        "o": (0.0, 0.43056, 0.0, 0.0, 0.5),
        "s": (0.0, 0.43056, 0.0, 0.0, 0.39445),
        "u": (0.0, 0.43056, 0.0, 0.0, 0.55556),
        "x": (0.0, 0.43056, 0.0, 0.0, 0.52778),
        "y": (0.19444, 0.43056, 0.01389, 0.0, 0.52778),
        "A": (0.0, 0.68333, 0.0, 0.0, 0.75),
        "E": (0.0, 0.68333, 0.0, 0.0, 0.68056),
        "O": (0.0, 0.68333, 0.0, 0.0, 0.77778),
    }
)

MATH_ITALIC = _table(
    {
        "a": (0.0, 0.43056, 0.0, 0.02778, 0.52859),
        "b": (0.0, 0.69444, 0.0, 0.0, 0.42917),
        "c": (0.0, 0.43056, 0.0, 0.05556, 0.43276),
        "d": (0.0, 0.69444, 0.0, 0.16667, 0.52049),
        "e": (0.0, 0.43056, 0.0, 0.05556, 0.46563),
        "f": (0.19444, 0.69444, 0.10764, 0.16667, 0.48959),
        "g": (0.19444, 0.43056, 0.03588, 0.02778, 0.47697),
        "h": (0.0, 0.69444, 0.0, -0.02778, 0.57616),
        "i": (0.0, 0.65952, 0.0, 0.02778, 0.34451),
        "j": (0.19444, 0.65952, 0.05724, 0.08334, 0.41181),
        "k": (0.0, 0.69444, 0.03148, 0.0, 0.5206),
        "l": (0.0, 0.69444, 0.01968, 0.08334, 0.29838),
        "m": (0.0, 0.43056, 0.0, 0.0, 0.87801),
        "n": (0.0, 0.43056, 0.0, 0.0, 0.60023),
        "o": (0.0, 0.43056, 0.0, 0.05556, 0.48472),
        "p": (0.19444, 0.43056, 0.0, 0.08334, 0.50313),
        "q": (0.19444, 0.43056, 0.03588, 0.08334, 0.44641),
        "r": (0.0, 0.43056, 0.02778, 0.05556, 0.45116),
        "s": (0.0, 0.43056, 0.0, 0.05556, 0.46875),
        "t": (0.0, 0.61508, 0.0, 0.08334, 0.36111),
        "u": (0.0, 0.43056, 0.0, 0.02778, 0.57246),
        "v": (0.0, 0.43056, 0.03588, 0.02778, 0.48472),
        "w": (0.0, 0.43056, 0.02691, 0.08334, 0.71592),
        "x": (0.0, 0.43056, 0.0, 0.02778, 0.57153),
        "y": (0.19444, 0.43056, 0.03588, 0.05556, 0.49028),
        "z": (0.0, 0.43056, 0.04398, 0.05556, 0.46505),
        "A": (0.0, 0.68333, 0.0, 0.13889, 0.75),
        "B": (0.0, 0.68333, 0.05017, 0.08334, 0.75851),
        "X": (0.0, 0.68333, 0.07847, 0.08334, 0.82847),
    }
)


class MetricsTable:
    """Read-only lookup of character metrics per font plus font parameters."""

    def __init__(
        self,
        fonts: Mapping[str, Mapping[int, CharacterMetrics]],
        font_metrics: FontMetrics | None = None,
    ) -> None:
        self._fonts = MappingProxyType(
            {name: MappingProxyType(dict(chars)) for name, chars in fonts.items()}
        )
        self._font_metrics = font_metrics or FontMetrics()

    @property
    def font_names(self) -> list[str]:
        return sorted(self._fonts)

    def font_metrics(self) -> FontMetrics:
        return self._font_metrics

    def get_character_metrics(self, char: str, font: str) -> CharacterMetrics | None:
        """Metrics of the first code point of ``char`` in ``font``.

        Returns None when the font or the character is unknown; the caller
        decides whether that is fatal.
        """
        chars = self._fonts.get(font)
        if chars is None or not char:
            return None
        return chars.get(ord(char[0]))

    def with_font(
        self,
        name: str,
        chars: Mapping[int, CharacterMetrics],
        font_metrics: FontMetrics | None = None,
    ) -> MetricsTable:
        """Return a new table with ``chars`` overlaid on font ``name``."""
        fonts = {font: dict(table) for font, table in self._fonts.items()}
        fonts.setdefault(name, {}).update(chars)
        return MetricsTable(fonts, font_metrics or self._font_metrics)


DEFAULT_METRICS = MetricsTable(
    {"Main-Regular": MAIN_REGULAR, "Math-Italic": MATH_ITALIC},
    FontMetrics(),
)
