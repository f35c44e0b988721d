"""Pytest configuration and shared fixtures for math-accent tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont, newTable
from fontTools.ttLib.tables._k_e_r_n import KernTable_format_0

from math_accent.fonts import DEFAULT_METRICS, CharacterMetrics, MetricsTable
from math_accent.layout import Options
from math_accent.tree import SymbolNode

EXPRESSION_XML = """<?xml version="1.0" encoding="UTF-8"?>
<math>
  <supsub>
    <accent label="\\hat"><mathord>x</mathord></accent>
    <sup><textord>2</textord></sup>
  </supsub>
</math>"""


def _rect(x_min: int, y_min: int, x_max: int, y_max: int):
    pen = TTGlyphPen(None)
    pen.moveTo((x_min, y_min))
    pen.lineTo((x_min, y_max))
    pen.lineTo((x_max, y_max))
    pen.lineTo((x_max, y_min))
    pen.closePath()
    return pen.glyph()


def build_test_font(sx_height: int = 430) -> TTFont:
    """A 1000-unit font with ``x``, ``f`` and a skew character kerned to both."""
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder([".notdef", "x", "f", "skewchar"])
    fb.setupCharacterMap({ord("x"): "x", ord("f"): "f"})
    fb.setupGlyf(
        {
            ".notdef": TTGlyphPen(None).glyph(),
            "x": _rect(20, 0, 550, 430),
            "f": _rect(40, -200, 480, 700),
            "skewchar": _rect(0, 0, 100, 100),
        }
    )
    advances = {".notdef": 500, "x": 570, "f": 490, "skewchar": 100}
    glyf = fb.font["glyf"]
    fb.setupHorizontalMetrics(
        {name: (advance, getattr(glyf[name], "xMin", 0)) for name, advance in advances.items()}
    )
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Accent Test", "styleName": "Italic"})
    fb.setupOS2(sxHeight=sx_height, sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()

    kern = newTable("kern")
    kern.version = 0
    subtable = KernTable_format_0()
    subtable.version = 0
    subtable.format = 0
    subtable.coverage = 1
    subtable.kernTable = {("x", "skewchar"): 28, ("f", "skewchar"): 167}
    kern.kernTables = [subtable]
    fb.font["kern"] = kern
    return fb.font


@pytest.fixture
def options() -> Options:
    """Text-style layout options with the built-in metrics."""
    return Options()


@pytest.fixture
def x() -> SymbolNode:
    """The math-italic letter x (skew 0.02778em)."""
    return SymbolNode("mathord", "x")


@pytest.fixture
def skewed_metrics() -> MetricsTable:
    """Built-in metrics with a math-italic ``x`` of skew 0.1em."""
    return DEFAULT_METRICS.with_font(
        "Math-Italic", {ord("x"): CharacterMetrics(0.0, 0.43056, 0.0, 0.1, 0.57153)}
    )


@pytest.fixture
def test_font() -> TTFont:
    """In-memory font built with fontTools."""
    return build_test_font()


@pytest.fixture
def font_file(tmp_path: Path) -> Path:
    """The test font saved to disk."""
    path = tmp_path / "accent-test.ttf"
    build_test_font().save(str(path))
    return path


@pytest.fixture
def expression_file(tmp_path: Path) -> Path:
    """An expression document of x-hat squared."""
    path = tmp_path / "xhat.xml"
    path.write_text(EXPRESSION_XML, encoding="utf-8")
    return path


@pytest.fixture
def config_file(tmp_path: Path, font_file: Path) -> Path:
    """A YAML config that loads the test font as Math-Italic."""
    path = tmp_path / "math-accent.yaml"
    path.write_text(
        f"log_level: DEBUG\nprecision: 4\nfonts:\n  Math-Italic: {font_file.name}\n",
        encoding="utf-8",
    )
    return path
