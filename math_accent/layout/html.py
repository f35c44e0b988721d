"""Lay out parse nodes as a visual box tree.

Each node type has a builder registered with :func:`define_builder`;
:func:`build_group` dispatches to it. Accents register their builder from
:mod:`math_accent.layout.accent`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import replace

from math_accent.exceptions import MalformedNodeError
from math_accent.layout.boxes import (
    Box,
    Span,
    SymbolBox,
    VListElem,
    make_em,
    make_span,
    make_symbol,
    make_vlist,
)
from math_accent.layout.options import Options
from math_accent.layout.style import DISPLAY
from math_accent.tree.nodes import (
    AccentNode,
    ColorNode,
    Node,
    OrdGroupNode,
    SupSubNode,
    SymbolNode,
    is_character_box,
    node_type,
)

logger = logging.getLogger(__name__)

GroupBuilder = Callable[[Node, Options], Box]

GROUP_BUILDERS: dict[str, GroupBuilder] = {}

# Classes that give a box its spacing type
ATOM_CLASSES = frozenset(
    {"mord", "mop", "mbin", "mrel", "mopen", "mclose", "mpunct", "minner"}
)


def define_builder(*types: str) -> Callable[[GroupBuilder], GroupBuilder]:
    """Register a builder for one or more node types."""

    def decorator(builder: GroupBuilder) -> GroupBuilder:
        for name in types:
            GROUP_BUILDERS[name] = builder
        return builder

    return decorator


def build_group(node: Node, options: Options, base_options: Options | None = None) -> Box:
    """Lay out one node.

    When ``base_options`` is given and differs in size from ``options``, the
    box is wrapped in a sizing span whose dimensions are expressed in the
    ems of ``base_options``.
    """
    builder = GROUP_BUILDERS.get(node_type(node))
    if builder is None:
        raise MalformedNodeError("known node type", node_type(node))
    box = builder(node, options)

    if base_options is not None and options.size_multiplier != base_options.size_multiplier:
        multiplier = options.size_multiplier / base_options.size_multiplier
        box = make_span(
            ["sizing", f"reset-style{base_options.style.size}", f"style{options.style.size}"],
            [box],
            options,
        )
        box.height *= multiplier
        box.depth *= multiplier
        box.width *= multiplier

    return box


def build_expression(nodes: Iterable[Node], options: Options) -> list[Box]:
    return [build_group(node, options) for node in nodes]


def build_html(node: Node, options: Options | None = None) -> Span:
    """Lay out a whole expression under a ``base`` span."""
    options = options or Options()
    return make_span(["base"], [build_group(node, options)], options)


def get_type_of_dom_tree(box: Box) -> str | None:
    """Spacing class of a box, looking through class-less wrappers."""
    if box.classes and box.classes[0] in ATOM_CLASSES:
        return box.classes[0]
    children = getattr(box, "children", None)
    if isinstance(box, Span) and children:
        return get_type_of_dom_tree(children[-1])
    return None


@define_builder("mathord", "textord", "bin", "rel", "open", "close", "punct", "inner")
def build_symbol(node: SymbolNode, options: Options) -> SymbolBox:
    if node.mode == "math" and node.kind == "mathord":
        font, classes = "Math-Italic", ["mord", "mathit"]
    else:
        mclass = "mord" if node.kind in ("mathord", "textord") else f"m{node.kind}"
        font, classes = "Main-Regular", [mclass]
    return make_symbol(node.text, font, node.mode, options, classes)


@define_builder("ordgroup")
def build_ordgroup(node: OrdGroupNode, options: Options) -> Span:
    return make_span(["mord"], build_expression(node.body, options), options)


@define_builder("color")
def build_color(node: ColorNode, options: Options) -> Span:
    colored = options.with_color(node.color)
    return make_span([], build_expression(node.body, colored), colored)


def _defers_to_accent(node: SupSubNode) -> bool:
    return isinstance(node.base, AccentNode) and is_character_box(node.base.base)


@define_builder("supsub")
def build_supsub(node: SupSubNode, options: Options) -> Box:
    """Attach scripts to a nucleus following TeXbook rule 18.

    An accented single character hands the whole node to the accent builder
    so the scripts attach to the character, not the accent.
    """
    if _defers_to_accent(node):
        return GROUP_BUILDERS["accent"](node, options)

    base = build_group(node.base, options)
    metrics = options.font_metrics()
    base_is_char = is_character_box(node.base)

    sup_box = sub_box = None
    sup_shift = sub_shift = 0.0

    if node.sup is not None:
        sup_options = options.having_style(options.style.sup())
        sup_box = build_group(node.sup, sup_options, options)
        if not base_is_char:
            sup_shift = base.height - (
                sup_options.font_metrics().sup_drop
                * sup_options.size_multiplier
                / options.size_multiplier
            )

    if node.sub is not None:
        sub_options = options.having_style(options.style.sub())
        sub_box = build_group(node.sub, sub_options, options)
        if not base_is_char:
            sub_shift = base.depth + (
                sub_options.font_metrics().sub_drop
                * sub_options.size_multiplier
                / options.size_multiplier
            )

    if options.style == DISPLAY:
        min_sup_shift = metrics.sup1
    elif options.style.cramped:
        min_sup_shift = metrics.sup3
    else:
        min_sup_shift = metrics.sup2

    script_space = 0.5 / metrics.pt_per_em / options.size_multiplier
    script_style = {"margin-right": make_em(script_space)}
    sub_style = dict(script_style)
    if isinstance(base, SymbolBox) and base.italic:
        sub_style["margin-left"] = make_em(-base.italic)

    if sup_box is not None and sub_box is not None:
        sup_shift = max(sup_shift, min_sup_shift, sup_box.depth + 0.25 * metrics.x_height)
        sub_shift = max(sub_shift, metrics.sub2)

        max_width = 4 * metrics.default_rule_thickness
        gap = (sup_shift - sup_box.depth) - (sub_box.height - sub_shift)
        if gap < max_width:
            sub_shift = max_width - (sup_shift - sup_box.depth) + sub_box.height
            psi = 0.8 * metrics.x_height - (sup_shift - sup_box.depth)
            if psi > 0:
                sup_shift += psi
                sub_shift -= psi

        scripts = make_vlist(
            [
                VListElem(sub_box, shift=sub_shift, wrapper_style=sub_style),
                VListElem(sup_box, shift=-sup_shift, wrapper_style=script_style),
            ],
            "individualShift",
        )
    elif sup_box is not None:
        sup_shift = max(sup_shift, min_sup_shift, sup_box.depth + 0.25 * metrics.x_height)
        scripts = make_vlist(
            [VListElem(sup_box, wrapper_style=script_style)], "shift", -sup_shift
        )
    elif sub_box is not None:
        sub_shift = max(sub_shift, metrics.sub1, sub_box.height - 0.8 * metrics.x_height)
        scripts = make_vlist([VListElem(sub_box, wrapper_style=sub_style)], "shift", sub_shift)
    else:
        raise MalformedNodeError("supsub with sup or sub", "supsub without scripts")

    logger.debug("supsub shifts: sup=%.5f sub=%.5f", sup_shift, sub_shift)

    msupsub = make_span(["msupsub"], [scripts], options)
    msupsub.width += script_space
    mclass = get_type_of_dom_tree(base) or "mord"
    return make_span([mclass], [base, msupsub], options)


def rebase_supsub(node: SupSubNode, base: Node) -> SupSubNode:
    """Same scripts attached to a different nucleus; ``node`` is unchanged."""
    return replace(node, base=base)
