"""Unit tests for math_accent.markup."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from math_accent.accents import make_accent
from math_accent.exceptions import MalformedNodeError
from math_accent.markup import MathNode, TextNode, build_accent_mathml, build_group, build_mathml
from math_accent.markup.nodes import MATHML_NAMESPACE
from math_accent.tree import ColorNode, OrdGroupNode, SupSubNode, SymbolNode


class TestAccentMarkup:
    """Tests for build_accent_mathml."""

    def test_fixed_accent(self, x):
        node = build_accent_mathml(make_accent("\\hat", x))
        assert node.to_markup() == '<mover accent="true"><mi>x</mi><mo>ˆ</mo></mover>'

    def test_stretchy_accent_operator(self, x):
        node = build_accent_mathml(make_accent("\\widehat", x))
        operator = node.children[1]
        assert operator.get_attribute("stretchy") == "true"
        assert operator.to_text() == "^"

    def test_fixed_accent_operator_not_stretchy(self, x):
        node = build_accent_mathml(make_accent("\\ddot", x))
        assert node.children[1].get_attribute("stretchy") is None

    def test_dispatch_through_registry(self, x):
        accent = make_accent("\\widehat", x)
        assert build_accent_mathml(accent).to_markup() == build_group(accent).to_markup()

    def test_group_base_becomes_mrow(self, x):
        base = OrdGroupNode((x, SymbolNode("bin", "+"), SymbolNode("textord", "1")))
        node = build_accent_mathml(make_accent("\\overrightarrow", base))
        assert node.to_markup() == (
            '<mover accent="true"><mrow><mi>x</mi><mo>+</mo><mn>1</mn></mrow>'
            '<mo stretchy="true">→</mo></mover>'
        )

    def test_text_accent(self):
        base = SymbolNode("textord", "e", "text")
        node = build_accent_mathml(make_accent("\\'", base))
        assert node.to_markup() == '<mover accent="true"><mtext>e</mtext><mo>ˊ</mo></mover>'


class TestExpressionMarkup:
    """Tests for the surrounding MathML builders."""

    def test_document_wrapper(self, x):
        markup = build_mathml(make_accent("\\bar", x)).to_markup()
        root = ET.fromstring(markup)
        assert root.tag == f"{{{MATHML_NAMESPACE}}}math"
        semantics = root[0]
        assert semantics.tag.endswith("semantics")
        assert semantics[0].tag.endswith("mrow")

    def test_supsub_over_accent(self, x):
        node = SupSubNode(base=make_accent("\\hat", x), sup=SymbolNode("textord", "2"))
        assert build_group(node).to_markup() == (
            '<msup><mover accent="true"><mi>x</mi><mo>ˆ</mo></mover><mn>2</mn></msup>'
        )

    def test_subsup_order(self, x):
        node = SupSubNode(base=x, sup=SymbolNode("textord", "2"), sub=SymbolNode("mathord", "i"))
        assert build_group(node).to_markup() == "<msubsup><mi>x</mi><mi>i</mi><mn>2</mn></msubsup>"

    def test_color(self, x):
        node = build_group(ColorNode("#c00", (x,)))
        assert node.to_markup() == '<mstyle mathcolor="#c00"><mi>x</mi></mstyle>'

    def test_upright_letter(self):
        node = build_group(SymbolNode("textord", "A"))
        assert node.get_attribute("mathvariant") == "normal"

    def test_unknown_node_type(self):
        with pytest.raises(MalformedNodeError):
            build_group(object())  # type: ignore[arg-type]


class TestMathNode:
    """Tests for the MathML node tree."""

    def test_mixed_content_order(self):
        node = MathNode("mrow", [TextNode("a"), MathNode("mi", [TextNode("b")]), TextNode("c")])
        assert node.to_markup() == "<mrow>a<mi>b</mi>c</mrow>"
        assert node.to_text() == "abc"

    def test_attributes(self):
        node = MathNode("mo")
        node.set_attribute("stretchy", "true")
        assert node.get_attribute("stretchy") == "true"
        assert node.get_attribute("accent") is None
