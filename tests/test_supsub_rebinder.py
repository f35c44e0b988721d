"""Unit tests for scripts attached to an accented nucleus.

The scripts of x-hat squared are placed exactly as for x squared. The
finished accent replaces the nucleus, and only the height and spacing
class of the result change.
"""

from __future__ import annotations

import pytest

from math_accent.accents import make_accent
from math_accent.exceptions import MalformedNodeError
from math_accent.layout import Span, build_accent_html, build_group
from math_accent.layout.html import rebase_supsub
from math_accent.tree import OrdGroupNode, SupSubNode, SymbolNode

TWO = SymbolNode("textord", "2")


class TestAccentedScripts:
    """Tests for build_accent_html on a supsub."""

    def test_scripts_placed_against_bare_base(self, x, options):
        accented = SupSubNode(base=make_accent("\\hat", x), sup=TWO)
        bare = SupSubNode(base=x, sup=TWO)

        result = build_group(accented, options)
        plain = build_group(bare, options)

        assert isinstance(result, Span)
        assert result.children[1].to_dict() == plain.children[1].to_dict()

    def test_accent_replaces_nucleus(self, x, options):
        node = SupSubNode(base=make_accent("\\hat", x), sup=TWO)
        result = build_group(node, options)
        assert result.children[0].classes == ["mord", "accent"]

    def test_height_is_max_of_accent_and_scripts(self, x, options):
        accent = make_accent("\\hat", x)
        node = SupSubNode(base=accent, sup=TWO)

        accent_box = build_accent_html(accent, options)
        plain = build_group(SupSubNode(base=x, sup=TWO), options)
        result = build_group(node, options)

        assert result.height == pytest.approx(max(accent_box.height, plain.height))

    def test_subscript_only_height_comes_from_accent(self, x, options):
        node = SupSubNode(base=make_accent("\\hat", x), sub=TWO)
        result = build_group(node, options)
        assert result.height == pytest.approx(0.69444)

    def test_result_is_always_ord(self, options):
        plus = SymbolNode("bin", "+")
        node = SupSubNode(base=make_accent("\\hat", plus), sup=TWO)

        plain = build_group(SupSubNode(base=plus, sup=TWO), options)
        result = build_group(node, options)

        assert plain.classes[0] == "mbin"
        assert result.classes[0] == "mord"

    def test_depth_and_width_not_patched(self, x, options):
        node = SupSubNode(base=make_accent("\\hat", x), sup=TWO, sub=TWO)
        plain = build_group(SupSubNode(base=x, sup=TWO, sub=TWO), options)
        result = build_group(node, options)

        assert result.depth == pytest.approx(plain.depth)
        assert result.width == pytest.approx(plain.width)

    def test_input_tree_unchanged(self, x, options):
        accent = make_accent("\\hat", x)
        node = SupSubNode(base=accent, sup=TWO)
        build_group(node, options)
        assert node.base is accent

    def test_multi_glyph_accent_uses_generic_scripts(self, x, options):
        """Only an accented single character hands off to the accent builder."""
        base = make_accent("\\hat", OrdGroupNode((x, SymbolNode("mathord", "y"))))
        result = build_group(SupSubNode(base=base, sup=TWO), options)
        accent_box = build_accent_html(base, options)
        # generic layout raises the script above the accented base
        assert result.height > accent_box.height

    def test_direct_call_requires_accent_nucleus(self, x, options):
        with pytest.raises(MalformedNodeError):
            build_accent_html(SupSubNode(base=x, sup=TWO), options)


class TestRebaseSupsub:
    """Tests for rebase_supsub."""

    def test_swaps_base_only(self, x):
        node = SupSubNode(base=make_accent("\\hat", x), sup=TWO)
        rebased = rebase_supsub(node, x)

        assert rebased.base is x
        assert rebased.sup is TWO
        assert rebased.sub is None
        assert node.base is not x
