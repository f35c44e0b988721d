"""Width-matching artwork for stretchy accents.

Wide accents (``\\widehat``, ``\\widetilde``) come in a few fixed sizes
picked by how many characters they cover. Arrow-like accents are drawn as
one image, or as a left and right half that each cover half the width, and
have a minimum width below which they stop shrinking.

The artwork here is simple outline geometry in a 1000-unit-per-em view box.
"""

from __future__ import annotations

from dataclasses import dataclass

from math_accent.exceptions import UnknownAccentError
from math_accent.layout.boxes import Span, SvgBox, make_em, make_span
from math_accent.layout.options import Options
from math_accent.tree.nodes import AccentNode, OrdGroupNode

# label -> size index -> (view box width, view box height, height in ems)
WIDE_ACCENT_SIZES: dict[str, dict[int, tuple[int, int, float]]] = {
    "\\widehat": {
        1: (1062, 239, 0.24),
        2: (2364, 300, 0.3),
        3: (2364, 360, 0.3),
        4: (2364, 420, 0.42),
    },
    "\\widetilde": {
        1: (600, 260, 0.26),
        2: (1033, 286, 0.286),
        3: (2339, 306, 0.3),
        4: (2340, 312, 0.34),
    },
}

# Size index by number of covered characters, up to five
_WIDE_INDEX = (1, 1, 2, 2, 3, 3)


@dataclass(frozen=True)
class StretchyImage:
    paths: tuple[str, ...]
    min_width: float
    view_box_height: int
    align: str = "xMinYMin"


SVG_PATHS: dict[str, str] = {
    "rightarrow": "M0 241h904l-120-120h56l160 140-160 140h-56l120-120H0z",
    "leftarrow": "M1000 241H96l120-120h-56L0 261l160 140h56L96 281h904z",
    "doublerightarrow": "M0 180h880l-80-80h56l144 180-144 180h-56l80-80H0v-40h920l40-60-40-60H0z",
    "rightharpoon": "M0 241h904l-120-120h56l160 160H0z",
    "leftharpoon": "M1000 241H96l120-120h-56L0 281h1000z",
    "leftgroup": "M0 342c0-180 160-302 500-302v40C200 80 60 180 60 342z",
    "rightgroup": "M1000 342c0-180-160-302-500-302v40c300 0 440 100 440 262z",
    "leftlinesegment": "M20 241v40h980v-40zM0 121v280h40V121z",
    "rightlinesegment": "M0 241v40h980v-40zM960 121v280h40V121z",
    # \vec, drawn as a small right arrow above the base
    "vec": "M377 20c0-5 2-9 6-12l8-8h22c12 12 58 60 58 66v8c-4 6-44 48-58 60h-22"
    "c-6-6-8-10-8-14 0-6 14-24 34-44H18v-40h392c-22-20-33-30-33-16z",
}

STRETCHY_IMAGES: dict[str, StretchyImage] = {
    "\\overrightarrow": StretchyImage((SVG_PATHS["rightarrow"],), 0.888, 522, "xMaxYMin"),
    "\\overleftarrow": StretchyImage((SVG_PATHS["leftarrow"],), 0.888, 522, "xMinYMin"),
    "\\Overrightarrow": StretchyImage((SVG_PATHS["doublerightarrow"],), 0.888, 560, "xMaxYMin"),
    "\\overleftrightarrow": StretchyImage(
        (SVG_PATHS["leftarrow"], SVG_PATHS["rightarrow"]), 0.888, 522
    ),
    "\\overgroup": StretchyImage((SVG_PATHS["leftgroup"], SVG_PATHS["rightgroup"]), 0.888, 342),
    "\\overlinesegment": StretchyImage(
        (SVG_PATHS["leftlinesegment"], SVG_PATHS["rightlinesegment"]), 0.888, 522
    ),
    "\\overleftharpoon": StretchyImage((SVG_PATHS["leftharpoon"],), 0.888, 522, "xMinYMin"),
    "\\overrightharpoon": StretchyImage((SVG_PATHS["rightharpoon"],), 0.888, 522, "xMaxYMin"),
}

# (width, height) in ems of static artwork
STATIC_SVG_SIZES: dict[str, tuple[float, float]] = {"vec": (0.471, 0.714)}


def _wide_path(label: str, view_box_width: int, view_box_height: int) -> str:
    w, h = view_box_width, view_box_height
    if label == "\\widehat":
        return f"M0 {h}L{w // 2} 0L{w} {h}h-60L{w // 2} 60L60 {h}z"
    quarter = w // 4
    return (
        f"M0 {h - 40}C{quarter} 0 {quarter} 0 {w // 2} {h // 2}"
        f"S{w - quarter} {h} {w} 40v40C{w - quarter} {h} {w - quarter} {h} {w // 2} {h // 2 + 40}"
        f"S{quarter} 40 0 {h}z"
    )


def _covered_characters(accent: AccentNode) -> int:
    if isinstance(accent.base, OrdGroupNode):
        return len(accent.base.body)
    return 1


def svg_span(accent: AccentNode, options: Options, width: float = 0.0) -> Span:
    """Artwork for a stretchy accent, stretched to ``width`` ems.

    Raises:
        UnknownAccentError: If the label has no stretchy artwork.
    """
    label = accent.label
    name = label.lstrip("\\")

    if label in WIDE_ACCENT_SIZES:
        num_chars = _covered_characters(accent)
        index = 4 if num_chars > 5 else _WIDE_INDEX[num_chars]
        view_box_width, view_box_height, height = WIDE_ACCENT_SIZES[label][index]
        svg = SvgBox(
            name=f"{name}{index}",
            paths=[_wide_path(label, view_box_width, view_box_height)],
            view_box_width=view_box_width,
            view_box_height=view_box_height,
            preserve_aspect_ratio="none",
            height=height,
            width=width,
        )
        span = make_span([], [svg], options)
        span.height = height
        span.style["height"] = make_em(height)
        return span

    image = STRETCHY_IMAGES.get(label)
    if image is None:
        raise UnknownAccentError(label, details={"asset": "stretchy"})

    height = image.view_box_height / 1000
    stretched = max(width, image.min_width)
    if len(image.paths) == 1:
        parts = [
            SvgBox(
                name=name,
                paths=[image.paths[0]],
                view_box_width=1000,
                view_box_height=image.view_box_height,
                preserve_aspect_ratio=f"{image.align} slice",
                height=height,
                width=stretched,
            )
        ]
    else:
        parts = [
            SvgBox(
                classes=[side],
                name=f"{name}-{side}",
                paths=[path],
                view_box_width=1000,
                view_box_height=image.view_box_height,
                preserve_aspect_ratio=f"{align} slice",
                height=height,
                width=stretched / 2,
            )
            for side, align, path in (
                ("halfarrow-left", "xMinYMin", image.paths[0]),
                ("halfarrow-right", "xMaxYMin", image.paths[1]),
            )
        ]

    span = make_span(["stretchy"], parts, options)
    span.height = height
    span.depth = 0.0
    span.style["height"] = make_em(height)
    span.style["min-width"] = make_em(image.min_width)
    return span


def static_svg(name: str, options: Options) -> Span:
    """Fixed-size artwork, such as the ``\\vec`` arrow."""
    try:
        width, height = STATIC_SVG_SIZES[name]
    except KeyError:
        raise UnknownAccentError(name, details={"asset": "static"}) from None
    svg = SvgBox(
        name=name,
        paths=[SVG_PATHS[name]],
        view_box_width=width * 1000,
        view_box_height=height * 1000,
        height=height,
        width=width,
    )
    span = make_span(["overlay"], [svg], options)
    span.style["height"] = make_em(height)
    span.style["width"] = make_em(width)
    return span
