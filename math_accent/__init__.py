"""math-accent: TeX accent layout with box and MathML output.

This library provides:
- Accent placement following TeXbook rule 12 (skew and clearance)
- Fixed glyph accents and stretchy accents sized to their base
- Super/subscripts that attach to an accented character, not its accent
- Presentation MathML for the same parse trees
- Font metrics read from TrueType/OpenType files

Example:
    >>> from math_accent import AccentRenderer, make_accent
    >>> from math_accent.tree import SymbolNode
    >>> node = make_accent("\\\\hat", SymbolNode("mathord", "x"))
    >>> AccentRenderer().render_html(node).box.height
"""

from math_accent.api import AccentRenderer, RenderResult
from math_accent.accents import ACCENTS, AccentKind, get_accent_kind, make_accent
from math_accent.config import Config
from math_accent.exceptions import (
    ConfigError,
    ExpressionParseError,
    FontMetricsError,
    MalformedNodeError,
    MathAccentError,
    UnknownAccentError,
)

__version__ = "0.1.0"

__all__ = [
    # Main API
    "AccentRenderer",
    "RenderResult",
    "Config",
    # Accent table
    "ACCENTS",
    "AccentKind",
    "get_accent_kind",
    "make_accent",
    # Exceptions
    "MathAccentError",
    "MalformedNodeError",
    "UnknownAccentError",
    "ExpressionParseError",
    "FontMetricsError",
    "ConfigError",
    # Metadata
    "__version__",
]
