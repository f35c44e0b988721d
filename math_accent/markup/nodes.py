"""MathML node tree.

A small presentation-MathML DOM that serializes through ElementTree.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Union

MATHML_NAMESPACE = "http://www.w3.org/1998/Math/MathML"


@dataclass(eq=False)
class TextNode:
    text: str

    def to_text(self) -> str:
        return self.text


@dataclass(eq=False)
class MathNode:
    """A MathML element such as ``mi``, ``mo`` or ``mover``."""

    type: str
    children: list[MarkupNode] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = value

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)

    def to_element(self) -> ET.Element:
        """Convert to an ElementTree element.

        Text children become the element's text (or a preceding sibling's
        tail) so mixed content keeps its order.
        """
        element = ET.Element(self.type, dict(self.attributes))
        last: ET.Element | None = None
        for child in self.children:
            if isinstance(child, TextNode):
                if last is None:
                    element.text = (element.text or "") + child.text
                else:
                    last.tail = (last.tail or "") + child.text
            else:
                last = child.to_element()
                element.append(last)
        return element

    def to_markup(self) -> str:
        return ET.tostring(self.to_element(), encoding="unicode")

    def to_text(self) -> str:
        """Concatenated text content of the subtree."""
        return "".join(child.to_text() for child in self.children)


MarkupNode = Union[MathNode, TextNode]
