"""Visual box layout for math-accent.

This subpackage provides:
- TeX styles and layout options
- Box primitives (symbols, spans, vertical lists, SVG artwork)
- Expression layout, including super/subscripts (TeXbook rule 18)
- Accent layout (TeXbook rule 12)
"""

from math_accent.layout.options import Options
from math_accent.layout.style import DISPLAY, SCRIPT, SCRIPTSCRIPT, STYLES, TEXT, Style
from math_accent.layout.boxes import Box, Span, SvgBox, SymbolBox, VList, VListChild
from math_accent.layout.html import build_expression, build_group, build_html
from math_accent.layout.accent import (
    TEXTCIRCLED_TOP_NUDGE,
    ResolvedLayout,
    build_accent_html,
    compose_vertical,
    compute_clearance,
    resolve_layout,
    resolve_skew,
    select_accent_body,
)

__all__ = [
    "Box",
    "DISPLAY",
    "Options",
    "ResolvedLayout",
    "SCRIPT",
    "SCRIPTSCRIPT",
    "STYLES",
    "Span",
    "Style",
    "SvgBox",
    "SymbolBox",
    "TEXT",
    "TEXTCIRCLED_TOP_NUDGE",
    "VList",
    "VListChild",
    "build_accent_html",
    "build_expression",
    "build_group",
    "build_html",
    "compose_vertical",
    "compute_clearance",
    "resolve_layout",
    "resolve_skew",
    "select_accent_body",
]
