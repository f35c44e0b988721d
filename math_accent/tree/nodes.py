"""Parse nodes consumed by the layout engine.

Nodes are immutable. A tree is built once (by a loader or by hand) and
laid out any number of times; layout never mutates it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

from math_accent.exceptions import MalformedNodeError

Mode = Literal["math", "text"]

# Atom kinds of a single glyph
SYMBOL_KINDS = frozenset(
    {"mathord", "textord", "bin", "rel", "open", "close", "punct", "inner"}
)


@dataclass(frozen=True)
class SymbolNode:
    """A single glyph."""

    kind: str
    text: str
    mode: Mode = "math"

    def __post_init__(self) -> None:
        if self.kind not in SYMBOL_KINDS:
            raise MalformedNodeError("symbol", self.kind)

    @property
    def type(self) -> str:
        return self.kind


@dataclass(frozen=True)
class OrdGroupNode:
    """A braced group of nodes laid out side by side."""

    body: tuple[Node, ...]
    mode: Mode = "math"

    type = "ordgroup"


@dataclass(frozen=True)
class ColorNode:
    """Styling-only wrapper that paints its body in a color."""

    color: str
    body: tuple[Node, ...]
    mode: Mode = "math"

    type = "color"


@dataclass(frozen=True)
class AccentNode:
    """One application of an accent to a base expression.

    Build these with :func:`math_accent.accents.make_accent` so the
    stretchy/shifty flags come from the accent table.
    """

    label: str
    is_stretchy: bool
    is_shifty: bool
    base: Node
    mode: Mode = "math"

    type = "accent"


@dataclass(frozen=True)
class SupSubNode:
    """A nucleus with a superscript and/or subscript attached."""

    base: Node
    sup: Node | None = None
    sub: Node | None = None
    mode: Mode = "math"

    type = "supsub"

    def __post_init__(self) -> None:
        if self.sup is None and self.sub is None:
            raise MalformedNodeError("supsub with sup or sub", "supsub without scripts")


Node = Union[SymbolNode, OrdGroupNode, ColorNode, AccentNode, SupSubNode]


def node_type(node: object) -> str:
    return getattr(node, "type", type(node).__name__)


def assert_node_type(node: object, expected: str) -> Node:
    """Return ``node`` if it has type ``expected``, else raise MalformedNodeError."""
    if node is None or node_type(node) != expected:
        raise MalformedNodeError(expected, "None" if node is None else node_type(node))
    return node  # type: ignore[return-value]


def check_node_type(node: object, expected: str) -> Node | None:
    """Return ``node`` if it has type ``expected``, else None."""
    if node is not None and node_type(node) == expected:
        return node  # type: ignore[return-value]
    return None


def get_base_elem(node: Node) -> Node:
    """Peel styling-only wrappers to reach the innermost element.

    Single-element groups and color wrappers are descended into; anything
    else stops the walk and is returned as is.
    """
    while True:
        if isinstance(node, (OrdGroupNode, ColorNode)) and len(node.body) == 1:
            node = node.body[0]
        else:
            return node


def is_character_box(node: Node) -> bool:
    """True if ``node`` is a single glyph under zero or more styling wrappers."""
    return isinstance(get_base_elem(node), SymbolNode)
