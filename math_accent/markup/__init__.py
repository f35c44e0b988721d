"""Structured markup (MathML) output for math-accent.

This subpackage provides:
- A small MathML node tree serialized through ElementTree
- Builders from parse nodes to MathML, including ``mover`` accents
"""

from math_accent.markup.nodes import MathNode, TextNode
from math_accent.markup.mathml import build_accent_mathml, build_group, build_mathml

__all__ = [
    "MathNode",
    "TextNode",
    "build_accent_mathml",
    "build_group",
    "build_mathml",
]
