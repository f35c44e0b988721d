"""Parse trees for math-accent.

This subpackage provides:
- Immutable parse nodes (symbols, groups, color, accents, scripts)
- Character-box detection and styling-wrapper peeling

Expression documents are loaded by :mod:`math_accent.tree.loader`.
"""

from math_accent.tree.nodes import (
    AccentNode,
    ColorNode,
    Node,
    OrdGroupNode,
    SupSubNode,
    SymbolNode,
    assert_node_type,
    check_node_type,
    get_base_elem,
    is_character_box,
)

__all__ = [
    "AccentNode",
    "ColorNode",
    "Node",
    "OrdGroupNode",
    "SupSubNode",
    "SymbolNode",
    "assert_node_type",
    "check_node_type",
    "get_base_elem",
    "is_character_box",
]
