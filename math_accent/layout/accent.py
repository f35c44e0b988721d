"""Accent layout, TeXbook pg. 443, rule 12.

The accent's base is laid out in the cramped style. A shifty accent over a
single character is moved right by the character's skew (its kern with the
font's skew character); the accent then sits ``clearance`` lower than the
top of the base, where clearance is the base height capped at the x-height.

This builder also handles a supsub whose nucleus is an accent, so that the
scripts attach to the accented character and are not pushed around by the
height of the accent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, cast

from math_accent.accents import FULL_ACCENT_LABEL, SVG_ACCENT_LABEL, get_accent_kind
from math_accent.exceptions import MalformedNodeError, UnknownAccentError
from math_accent.layout import stretchy
from math_accent.layout.boxes import (
    Box,
    Span,
    SymbolBox,
    VListElem,
    VListKern,
    make_em,
    make_span,
    make_symbol,
    make_vlist,
)
from math_accent.layout.html import build_group, define_builder, rebase_supsub
from math_accent.layout.options import Options
from math_accent.tree.nodes import (
    AccentNode,
    Node,
    SupSubNode,
    assert_node_type,
    check_node_type,
    get_base_elem,
    is_character_box,
)

logger = logging.getLogger(__name__)

ACCENT_FONT = "Main-Regular"

# \textcircled draws \bigcirc, which sits this much too high without a nudge
TEXTCIRCLED_TOP_NUDGE = 0.2


@dataclass(frozen=True)
class ResolvedLayout:
    """Everything decided about one accent before it is stacked."""

    skew: float
    clearance: float
    accent_body: Box
    base_box: Box
    # Render offset of a fixed accent; None for stretchy accents
    left: float | None = None

    @property
    def is_stretchy(self) -> bool:
        return self.left is None


def resolve_skew(accent: AccentNode, options: Options) -> float:
    """Horizontal skew of the accent in ems.

    "If the nucleus is not a single character, let s = 0; otherwise set s
    to the kern amount for the nucleus followed by the \\skewchar of its
    font."
    """
    if not accent.is_shifty or not is_character_box(accent.base):
        return 0.0
    # The peeled-off wrappers (color and the like) carry no metrics, so the
    # glyph is laid out on its own and that box is thrown away.
    base_char = get_base_elem(accent.base)
    char_box = build_group(base_char, options.having_cramped_style())
    if not isinstance(char_box, SymbolBox):
        raise MalformedNodeError("symbol box", char_box.kind)
    return char_box.skew


def compute_clearance(body: Box, options: Options, label: str) -> float:
    """Overlap between the top of the base and the bottom of the accent."""
    if label == FULL_ACCENT_LABEL:
        return body.height
    return min(body.height, options.font_metrics().x_height)


def _accent_glyph(accent: AccentNode, options: Options) -> tuple[Box, float]:
    if accent.label == SVG_ACCENT_LABEL:
        glyph = stretchy.static_svg("vec", options)
        return glyph, stretchy.STATIC_SVG_SIZES["vec"][0]

    char = get_accent_kind(accent.label).char
    if options.metrics.get_character_metrics(char, ACCENT_FONT) is None:
        raise UnknownAccentError(accent.label, details={"font": ACCENT_FONT, "char": char})
    glyph = make_symbol(char, ACCENT_FONT, accent.mode, options)
    # The italic correction would only shift the accent where we don't want it
    glyph.italic = 0.0
    return glyph, glyph.width


def select_accent_body(
    accent: AccentNode, body: Box, skew: float, options: Options
) -> tuple[Box, float | None]:
    """Build the accent itself.

    Returns:
        Tuple of (accent body box, left offset). The offset is None for
        stretchy accents, which are sized to the base instead.
    """
    if accent.is_stretchy:
        width = body.width - 2 * skew if skew > 0 else body.width
        return stretchy.svg_span(accent, options, max(width, 0.0)), None

    glyph, width = _accent_glyph(accent, options)
    accent_body = make_span(["accent-body"], [glyph])

    # Full accents widen the result to at least their own width and sit
    # directly on the base.
    is_full = accent.label == FULL_ACCENT_LABEL
    left = skew
    if is_full:
        accent_body.classes.append("accent-full")
    else:
        # An accent body takes no horizontal room; it is centered over the
        # skew point by moving it left half its width.
        accent_body.width = 0.0
        left -= width / 2

    accent_body.style["left"] = make_em(left)
    if is_full:
        accent_body.style["top"] = make_em(TEXTCIRCLED_TOP_NUDGE)

    return accent_body, left


def resolve_layout(accent: AccentNode, options: Options) -> ResolvedLayout:
    body = build_group(accent.base, options.having_cramped_style())
    skew = resolve_skew(accent, options)
    clearance = compute_clearance(body, options, accent.label)
    accent_body, left = select_accent_body(accent, body, skew, options)
    logger.debug(
        "accent %s: skew=%.5f clearance=%.5f left=%s",
        accent.label,
        skew,
        clearance,
        left,
    )
    return ResolvedLayout(
        skew=skew,
        clearance=clearance,
        accent_body=accent_body,
        base_box=body,
        left=left,
    )


def compose_vertical(layout: ResolvedLayout, options: Options) -> Span:
    """Stack base and accent on the base's baseline as a ``mord accent``."""
    if layout.is_stretchy:
        wrapper_style: dict[str, str] = {}
        if layout.skew > 0:
            wrapper_style = {
                "width": f"calc(100% - {make_em(2 * layout.skew)})",
                "margin-left": make_em(2 * layout.skew),
            }
        vlist = make_vlist(
            [
                VListElem(layout.base_box),
                VListElem(
                    layout.accent_body,
                    wrapper_classes=["svg-align"],
                    wrapper_style=wrapper_style,
                ),
            ],
            "firstBaseline",
        )
    else:
        vlist = make_vlist(
            [
                VListElem(layout.base_box),
                VListKern(-layout.clearance),
                VListElem(layout.accent_body),
            ],
            "firstBaseline",
        )
    return make_span(["mord", "accent"], [vlist], options)


def build_accent_box(accent: AccentNode, options: Options) -> Span:
    return compose_vertical(resolve_layout(accent, options), options)


@define_builder("accent")
def build_accent_html(node: Node, options: Options) -> Box:
    """Lay out an accent, or a supsub whose nucleus is an accent.

    For a supsub the scripts are laid out against the accent's own base,
    then the finished accent replaces that base in the scripts box.

    Raises:
        MalformedNodeError: If ``node`` is neither an accent nor a supsub
            over an accent.
    """
    supsub = cast(Optional[SupSubNode], check_node_type(node, "supsub"))
    scripts_box: Box | None = None
    if supsub is not None:
        accent = cast(AccentNode, assert_node_type(supsub.base, "accent"))
        scripts_box = build_group(rebase_supsub(supsub, accent.base), options)
    else:
        accent = cast(AccentNode, assert_node_type(node, "accent"))

    accent_box = build_accent_box(accent, options)
    if scripts_box is None:
        return accent_box

    if not isinstance(scripts_box, Span) or not scripts_box.children:
        raise MalformedNodeError("supsub span", scripts_box.kind)
    scripts_box.children[0] = accent_box
    # Script positions were fixed against the bare base; only the height
    # needs to account for the accent.
    scripts_box.height = max(accent_box.height, scripts_box.height)
    # Accents are always ords, even when their innards are not
    scripts_box.classes[0] = "mord"
    return scripts_box
