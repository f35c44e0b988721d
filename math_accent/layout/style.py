"""The eight TeX styles (TeXbook chapter 17).

Each of display, text, script and scriptscript comes in a normal and a
cramped variant. Cramped styles raise superscripts less.
"""

from __future__ import annotations

from dataclasses import dataclass

# Font size index per style size: display and text share size 0
SIZE_MULTIPLIERS = (1.0, 1.0, 0.7, 0.5)


@dataclass(frozen=True)
class Style:
    id: int
    size: int
    cramped: bool
    name: str

    def sup(self) -> Style:
        return STYLES[_SUP[self.id]]

    def sub(self) -> Style:
        return STYLES[_SUB[self.id]]

    def cramp(self) -> Style:
        return STYLES[_CRAMP[self.id]]

    @property
    def size_multiplier(self) -> float:
        return SIZE_MULTIPLIERS[self.size]

    def __str__(self) -> str:
        return self.name


STYLES = (
    Style(0, 0, False, "D"),
    Style(1, 0, True, "D'"),
    Style(2, 1, False, "T"),
    Style(3, 1, True, "T'"),
    Style(4, 2, False, "S"),
    Style(5, 2, True, "S'"),
    Style(6, 3, False, "SS"),
    Style(7, 3, True, "SS'"),
)

_SUP = (4, 5, 4, 5, 6, 7, 6, 7)
_SUB = (5, 5, 5, 5, 7, 7, 7, 7)
_CRAMP = (1, 1, 3, 3, 5, 5, 7, 7)

DISPLAY = STYLES[0]
TEXT = STYLES[2]
SCRIPT = STYLES[4]
SCRIPTSCRIPT = STYLES[6]
