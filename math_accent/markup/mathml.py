"""Build presentation MathML from parse nodes.

The markup expresses what the formula means, not where anything is drawn:
no skew, clearance or asset sizing is consulted here.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from math_accent.accents import get_accent_kind
from math_accent.exceptions import MalformedNodeError
from math_accent.markup.nodes import MATHML_NAMESPACE, MathNode, TextNode
from math_accent.tree.nodes import (
    AccentNode,
    ColorNode,
    Node,
    OrdGroupNode,
    SupSubNode,
    SymbolNode,
    node_type,
)

MathMLBuilder = Callable[[Node], MathNode]

MATHML_BUILDERS: dict[str, MathMLBuilder] = {}


def define_mathml_builder(*types: str) -> Callable[[MathMLBuilder], MathMLBuilder]:
    def decorator(builder: MathMLBuilder) -> MathMLBuilder:
        for name in types:
            MATHML_BUILDERS[name] = builder
        return builder

    return decorator


def build_group(node: Node) -> MathNode:
    builder = MATHML_BUILDERS.get(node_type(node))
    if builder is None:
        raise MalformedNodeError("known node type", node_type(node))
    return builder(node)


def build_expression(nodes: Iterable[Node]) -> list[MathNode]:
    return [build_group(node) for node in nodes]


def build_expression_row(nodes: Iterable[Node]) -> MathNode:
    """A single node as is, several wrapped in an ``mrow``."""
    children = build_expression(nodes)
    if len(children) == 1:
        return children[0]
    return MathNode("mrow", list(children))


def build_mathml(node: Node) -> MathNode:
    """Wrap an expression in ``<math><semantics><mrow>``."""
    row = MathNode("mrow", [build_group(node)])
    math = MathNode("math", [MathNode("semantics", [row])])
    math.set_attribute("xmlns", MATHML_NAMESPACE)
    return math


def stretchy_operator(label: str) -> MathNode:
    """Stretchy ``mo`` operator for a stretchy accent."""
    node = MathNode("mo", [TextNode(get_accent_kind(label).char)])
    node.set_attribute("stretchy", "true")
    return node


@define_mathml_builder("mathord", "textord", "bin", "rel", "open", "close", "punct", "inner")
def build_symbol(node: SymbolNode) -> MathNode:
    text = TextNode(node.text)
    if node.mode == "text":
        return MathNode("mtext", [text])
    if node.kind == "mathord":
        return MathNode("mi", [text])
    if node.kind == "textord":
        if node.text.isdigit():
            return MathNode("mn", [text])
        mi = MathNode("mi", [text])
        mi.set_attribute("mathvariant", "normal")
        return mi
    return MathNode("mo", [text])


@define_mathml_builder("ordgroup")
def build_ordgroup(node: OrdGroupNode) -> MathNode:
    return MathNode("mrow", list(build_expression(node.body)))


@define_mathml_builder("color")
def build_color(node: ColorNode) -> MathNode:
    mstyle = MathNode("mstyle", list(build_expression(node.body)))
    mstyle.set_attribute("mathcolor", node.color)
    return mstyle


@define_mathml_builder("supsub")
def build_supsub(node: SupSubNode) -> MathNode:
    children = [build_group(node.base)]
    if node.sub is not None:
        children.append(build_group(node.sub))
    if node.sup is not None:
        children.append(build_group(node.sup))

    if node.sub is None:
        tag = "msup"
    elif node.sup is None:
        tag = "msub"
    else:
        tag = "msubsup"
    return MathNode(tag, children)


@define_mathml_builder("accent")
def build_accent_mathml(node: AccentNode) -> MathNode:
    """``mover`` of the base and the accent operator, flagged ``accent``."""
    if node.is_stretchy:
        accent_node = stretchy_operator(node.label)
    else:
        accent_node = MathNode("mo", [TextNode(get_accent_kind(node.label).char)])

    mover = MathNode("mover", [build_group(node.base), accent_node])
    mover.set_attribute("accent", "true")
    return mover
