"""Unit tests for math_accent.fonts.

Fonts are built in memory with fontTools' FontBuilder, so no font files
need to be installed.
"""

from __future__ import annotations

import pytest

from math_accent.accents import make_accent
from math_accent.exceptions import FontMetricsError
from math_accent.fonts import DEFAULT_METRICS, MetricsTable, load_font_metrics, read_character_metrics
from math_accent.layout import Options, resolve_skew
from math_accent.layout.boxes import make_symbol
from math_accent.tree import SymbolNode


class TestReadCharacterMetrics:
    """Tests for read_character_metrics."""

    def test_dimensions_scaled_to_ems(self, test_font):
        chars, _x_height = read_character_metrics(test_font)
        f = chars[ord("f")]
        assert f.height == pytest.approx(0.7)
        assert f.depth == pytest.approx(0.2)
        assert f.width == pytest.approx(0.49)

    def test_skew_from_kern_pair(self, test_font):
        chars, _x_height = read_character_metrics(test_font)
        assert chars[ord("x")].skew == pytest.approx(0.028)
        assert chars[ord("f")].skew == pytest.approx(0.167)

    def test_other_skew_char_gives_no_skew(self, test_font):
        chars, _x_height = read_character_metrics(test_font, skew_char="tie")
        assert chars[ord("x")].skew == 0.0

    def test_x_height_from_os2(self, test_font):
        _chars, x_height = read_character_metrics(test_font)
        assert x_height == pytest.approx(0.43)

    def test_unmapped_glyphs_skipped(self, test_font):
        chars, _x_height = read_character_metrics(test_font)
        assert set(chars) == {ord("x"), ord("f")}

    def test_reads_from_file(self, font_file):
        chars, _x_height = read_character_metrics(font_file)
        assert chars[ord("x")].skew == pytest.approx(0.028)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FontMetricsError, match="Font file not found"):
            read_character_metrics(tmp_path / "none.ttf")

    def test_unreadable_file(self, tmp_path):
        bad = tmp_path / "bad.ttf"
        bad.write_bytes(b"not a font")
        with pytest.raises(FontMetricsError, match="Cannot read font"):
            read_character_metrics(bad)


class TestLoadFontMetrics:
    """Tests for load_font_metrics."""

    def test_overlay_keeps_builtin_glyphs(self, test_font):
        table = load_font_metrics(test_font)
        assert table.get_character_metrics("x", "Math-Italic").skew == pytest.approx(0.028)
        # y is not in the test font
        assert table.get_character_metrics("y", "Math-Italic").skew == pytest.approx(0.05556)
        assert table.get_character_metrics("ˆ", "Main-Regular") is not None

    def test_x_height_replaced(self, test_font):
        table = load_font_metrics(test_font)
        assert table.font_metrics().x_height == pytest.approx(0.43)

    def test_base_table_unchanged(self, test_font):
        load_font_metrics(test_font)
        assert DEFAULT_METRICS.get_character_metrics("x", "Math-Italic").skew == pytest.approx(0.02778)

    def test_new_font_name(self, test_font):
        table = load_font_metrics(test_font, font_name="Custom")
        assert "Custom" in table.font_names

    def test_loaded_skew_drives_layout(self, test_font):
        table = load_font_metrics(test_font)
        options = Options(metrics=table)
        accent = make_accent("\\hat", SymbolNode("mathord", "f"))
        assert resolve_skew(accent, options) == pytest.approx(0.167)


class TestMetricsTable:
    """Tests for MetricsTable lookups."""

    def test_unknown_font(self):
        assert DEFAULT_METRICS.get_character_metrics("x", "Nope") is None

    def test_lookup_is_by_char_and_font_only(self):
        """Text and math symbols in one font share their metrics."""
        options = Options()
        math = make_symbol("A", "Main-Regular", "math", options)
        text = make_symbol("A", "Main-Regular", "text", options)
        assert DEFAULT_METRICS.get_character_metrics("A", "Main-Regular").height == (
            pytest.approx(math.height)
        )
        assert text.to_dict() == math.to_dict()

    def test_unknown_char(self):
        assert DEFAULT_METRICS.get_character_metrics("Ω", "Main-Regular") is None

    def test_empty_table_uses_default_font_metrics(self):
        assert MetricsTable({}).font_metrics().x_height == pytest.approx(0.431)
