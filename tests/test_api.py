"""Unit tests for math_accent.api."""

from __future__ import annotations

import logging

import pytest

from math_accent import AccentRenderer, Config, FontMetricsError, make_accent
from math_accent.tree import AccentNode, SymbolNode


@pytest.fixture
def renderer() -> AccentRenderer:
    return AccentRenderer(config=Config())


class TestAccentRenderer:
    """Tests for AccentRenderer."""

    def test_render_html(self, renderer, x):
        result = renderer.render_html(make_accent("\\hat", x))
        assert result.success
        assert result.box.classes == ["base"]
        assert result.markup is None

    def test_render_mathml(self, renderer, x):
        result = renderer.render_mathml(make_accent("\\hat", x))
        assert result.success
        assert '<mover accent="true">' in result.markup

    def test_render_file(self, renderer, expression_file):
        result = renderer.render_file(expression_file)
        assert result.success, result.errors
        assert result.box is not None
        assert result.markup.startswith("<math")
        assert "<msup>" in result.markup

    def test_layout_error_reported(self, renderer, x):
        bad = AccentNode("\\overbanana", is_stretchy=True, is_shifty=False, base=x)
        result = renderer.render_html(bad)
        assert not result.success
        assert "overbanana" in result.errors[0]

    def test_render_collects_both_errors(self, renderer, x):
        bad = AccentNode("\\overbanana", is_stretchy=True, is_shifty=False, base=x)
        result = renderer.render(bad)
        assert not result.success
        assert len(result.errors) == 2

    def test_missing_file_reported(self, renderer, tmp_path):
        result = renderer.render_file(tmp_path / "missing.xml")
        assert not result.success
        assert "not found" in result.errors[0]

    def test_box_dict_precision(self, renderer, x):
        result = renderer.render_html(make_accent("\\hat", x))
        assert result.box_dict(precision=2)["height"] == 0.69

    def test_log_level_override(self, x):
        renderer = AccentRenderer(config=Config(log_level="ERROR"), log_level="debug")
        assert renderer.log_level == "DEBUG"

    def test_renderer_leaves_logger_level_alone(self):
        package_logger = logging.getLogger("math_accent")
        before = package_logger.level
        AccentRenderer(config=Config(log_level="ERROR"), log_level="debug")
        assert package_logger.level == before


class TestConfiguredFonts:
    """Tests for fonts named in the configuration."""

    def test_configured_font_changes_skew(self, config_file):
        renderer = AccentRenderer(config=Config.load(config_file))
        result = renderer.render_html(make_accent("\\hat", SymbolNode("mathord", "f")))
        accent_body = result.box.children[0].children[0].children[1].elem
        # skew 0.167 minus half the 0.5em glyph width
        assert accent_body.style["left"] == "-0.083em"

    def test_missing_configured_font(self, tmp_path):
        config = Config(fonts={"Math-Italic": tmp_path / "gone.ttf"})
        with pytest.raises(FontMetricsError):
            AccentRenderer(config=config)
