"""Load expression trees from XML documents.

The document mirrors the parse tree one element per node:

    <math>
      <supsub>
        <accent label="\\hat"><mathord>x</mathord></accent>
        <sup><textord>2</textord></sup>
      </supsub>
    </math>

Symbol elements (``mathord``, ``textord``, ``bin``, ``rel``, ``open``,
``close``, ``punct``, ``inner``) hold one character of text. ``<text>``
switches its contents to text mode. Several children where one node is
expected are grouped into an ordgroup.

Documents are parsed with defusedxml, so entity expansion and external
references are refused.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from math_accent.accents import make_accent
from math_accent.exceptions import ExpressionParseError, MathAccentError
from math_accent.tree.nodes import (
    SYMBOL_KINDS,
    ColorNode,
    Mode,
    Node,
    OrdGroupNode,
    SupSubNode,
    SymbolNode,
)

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _group(nodes: list[Node], mode: Mode, where: str) -> Node:
    if not nodes:
        raise ExpressionParseError(f"<{where}> needs at least one child element")
    if len(nodes) == 1:
        return nodes[0]
    return OrdGroupNode(tuple(nodes), mode=mode)


def _children(elem: Element, mode: Mode) -> list[Node]:
    return [element_to_node(child, mode) for child in elem]


def element_to_node(elem: Element, mode: Mode = "math") -> Node:
    """Convert one element (and its subtree) to a parse node.

    Raises:
        ExpressionParseError: If the element is not a known node or is
            missing required content.
    """
    tag = _local_name(elem.tag)

    if tag in SYMBOL_KINDS:
        text = (elem.text or "").strip()
        if len(text) != 1:
            raise ExpressionParseError(
                f"<{tag}> must contain exactly one character, got {text!r}"
            )
        return SymbolNode(tag, text, mode)

    if tag == "ordgroup":
        return OrdGroupNode(tuple(_children(elem, mode)), mode=mode)

    if tag == "color":
        color = elem.get("color")
        if not color:
            raise ExpressionParseError("<color> requires a 'color' attribute")
        return ColorNode(color, tuple(_children(elem, mode)), mode=mode)

    if tag == "text":
        return _group(_children(elem, "text"), "text", tag)

    if tag == "accent":
        label = elem.get("label")
        if not label:
            raise ExpressionParseError("<accent> requires a 'label' attribute")
        base = _group(_children(elem, mode), mode, tag)
        try:
            return make_accent(label, base, mode)
        except MathAccentError as e:
            raise ExpressionParseError(str(e), details={"label": label}) from e

    if tag == "supsub":
        base_elems = [child for child in elem if _local_name(child.tag) not in ("sup", "sub")]
        scripts = {
            _local_name(child.tag): child
            for child in elem
            if _local_name(child.tag) in ("sup", "sub")
        }
        if len(base_elems) != 1:
            raise ExpressionParseError("<supsub> needs exactly one base element")
        if not scripts:
            raise ExpressionParseError("<supsub> needs a <sup> or <sub>")
        sup = scripts.get("sup")
        sub = scripts.get("sub")
        return SupSubNode(
            base=element_to_node(base_elems[0], mode),
            sup=_group(_children(sup, mode), mode, "sup") if sup is not None else None,
            sub=_group(_children(sub, mode), mode, "sub") if sub is not None else None,
            mode=mode,
        )

    if tag == "math":
        return _group(_children(elem, mode), mode, tag)

    raise ExpressionParseError(f"Unknown element <{tag}>", details={"tag": tag})


def load_expression_string(source: str) -> Node:
    """Parse an expression document held in a string.

    Raises:
        ExpressionParseError: If the XML is malformed, unsafe or not a
            valid expression.
    """
    try:
        root = ET.fromstring(source)
    except ET.ParseError as e:
        raise ExpressionParseError(f"Failed to parse expression XML: {e}") from e
    except DefusedXmlException as e:
        raise ExpressionParseError(f"Refused unsafe expression XML: {e}") from e
    return element_to_node(root)


def load_expression(path: Path | str) -> Node:
    """Parse an expression document from a file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Expression file not found: {path}")
    return load_expression_string(path.read_text(encoding="utf-8"))
