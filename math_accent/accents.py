"""Accent kinds and their classification.

Which accents stretch to the width of their base, which are skew-corrected,
and which are only legal in text mode is fixed here at import time.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from math_accent.exceptions import UnknownAccentError
from math_accent.tree.nodes import AccentNode, Mode, Node

# Stretchy accents that still shift for the skew of a single-character base
SHIFTY_STRETCHY_LABELS = frozenset({"\\widehat", "\\widetilde"})

# Encircles its base instead of sitting above it
FULL_ACCENT_LABEL = "\\textcircled"

# Drawn from a static SVG rather than a font glyph
SVG_ACCENT_LABEL = "\\vec"


@dataclass(frozen=True)
class AccentKind:
    """Static description of one accent command."""

    label: str
    # Glyph used for both the visual box and the markup operator
    char: str
    is_stretchy: bool
    mode: Mode

    @property
    def is_shifty(self) -> bool:
        return not self.is_stretchy or self.label in SHIFTY_STRETCHY_LABELS


_MATH_FIXED = {
    "\\acute": "ˊ",
    "\\grave": "ˋ",
    "\\ddot": "¨",
    "\\tilde": "˜",
    "\\bar": "ˉ",
    "\\breve": "˘",
    "\\check": "ˇ",
    "\\hat": "ˆ",
    "\\vec": "⃗",
    "\\dot": "˙",
    "\\mathring": "˚",
}

_MATH_STRETCHY = {
    "\\widehat": "^",
    "\\widetilde": "~",
    "\\overrightarrow": "→",
    "\\overleftarrow": "←",
    "\\Overrightarrow": "⇒",
    "\\overleftrightarrow": "↔",
    "\\overgroup": "⏠",
    "\\overlinesegment": "‾",
    "\\overleftharpoon": "↼",
    "\\overrightharpoon": "⇀",
}

_TEXT = {
    "\\'": "ˊ",
    "\\`": "ˋ",
    "\\^": "ˆ",
    "\\~": "˜",
    "\\=": "ˉ",
    "\\u": "˘",
    "\\.": "˙",
    '\\"': "¨",
    "\\r": "˚",
    "\\H": "˝",
    "\\v": "ˇ",
    FULL_ACCENT_LABEL: "◯",
}


def _build_table() -> MappingProxyType[str, AccentKind]:
    table: dict[str, AccentKind] = {}
    for label, char in _MATH_FIXED.items():
        table[label] = AccentKind(label, char, is_stretchy=False, mode="math")
    for label, char in _MATH_STRETCHY.items():
        table[label] = AccentKind(label, char, is_stretchy=True, mode="math")
    for label, char in _TEXT.items():
        table[label] = AccentKind(label, char, is_stretchy=False, mode="text")
    return MappingProxyType(table)


ACCENTS = _build_table()


def get_accent_kind(label: str) -> AccentKind:
    """Look up an accent kind by its command label.

    Raises:
        UnknownAccentError: If the label is not an accent command.
    """
    try:
        return ACCENTS[label]
    except KeyError:
        raise UnknownAccentError(label) from None


def make_accent(label: str, base: Node, mode: Mode | None = None) -> AccentNode:
    """Create an accent node with flags taken from the accent table.

    ``mode`` defaults to the accent's own mode. Math accents are rejected in
    text mode and text accents in math mode.
    """
    kind = get_accent_kind(label)
    mode = mode or kind.mode
    if mode != kind.mode:
        raise UnknownAccentError(
            label, details={"mode": mode, "allowed_mode": kind.mode}
        )
    return AccentNode(
        label=label,
        is_stretchy=kind.is_stretchy,
        is_shifty=kind.is_shifty,
        base=base,
        mode=mode,
    )
