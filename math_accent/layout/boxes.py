"""Visual box tree and the primitives that build it.

Boxes carry TeX dimensions in ems (``height`` above the baseline, ``depth``
below it, ``width``) plus renderer-facing ``classes`` and CSS-like ``style``
entries. Render-only offsets such as ``left`` live in ``style`` and never
change a box's dimensions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Literal, Union

from math_accent.exceptions import MalformedNodeError
from math_accent.layout.options import Options
from math_accent.tree.nodes import Mode

logger = logging.getLogger(__name__)

PositionType = Literal["individualShift", "shift", "bottom", "firstBaseline"]


def make_em(value: float) -> str:
    """Format a length in ems, dropping float noise and negative zero."""
    return f"{round(value, 4) + 0.0:g}em"


@dataclass(eq=False)
class Box:
    classes: list[str] = field(default_factory=list)
    height: float = 0.0
    depth: float = 0.0
    width: float = 0.0
    style: dict[str, str] = field(default_factory=dict)

    kind = "box"

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def to_dict(self, precision: int = 5) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.kind,
            "classes": list(self.classes),
            "height": round(self.height, precision),
            "depth": round(self.depth, precision),
            "width": round(self.width, precision),
        }
        if self.style:
            data["style"] = dict(self.style)
        return data


@dataclass(eq=False)
class SymbolBox(Box):
    """One glyph from a font."""

    text: str = ""
    font: str = ""
    italic: float = 0.0
    skew: float = 0.0

    kind = "symbol"

    def to_dict(self, precision: int = 5) -> dict[str, Any]:
        data = super().to_dict(precision)
        data.update(
            text=self.text,
            font=self.font,
            italic=round(self.italic, precision),
            skew=round(self.skew, precision),
        )
        return data


@dataclass(eq=False)
class SvgBox(Box):
    """Vector artwork drawn into a ``view_box`` of font units."""

    name: str = ""
    paths: list[str] = field(default_factory=list)
    view_box_width: float = 0.0
    view_box_height: float = 0.0
    preserve_aspect_ratio: str = "xMinYMin"

    kind = "svg"

    def to_dict(self, precision: int = 5) -> dict[str, Any]:
        data = super().to_dict(precision)
        data.update(
            name=self.name,
            paths=list(self.paths),
            viewBox=[0, 0, self.view_box_width, self.view_box_height],
            preserveAspectRatio=self.preserve_aspect_ratio,
        )
        return data


@dataclass(eq=False)
class Span(Box):
    """A horizontal group of boxes."""

    children: list[Box] = field(default_factory=list)

    kind = "span"

    def to_dict(self, precision: int = 5) -> dict[str, Any]:
        data = super().to_dict(precision)
        data["children"] = [child.to_dict(precision) for child in self.children]
        return data


@dataclass(eq=False)
class VListChild:
    """A box placed in a vertical list with its baseline raised by ``shift``."""

    elem: Box
    shift: float
    wrapper_classes: list[str] = field(default_factory=list)
    wrapper_style: dict[str, str] = field(default_factory=dict)

    def to_dict(self, precision: int = 5) -> dict[str, Any]:
        data: dict[str, Any] = {
            "shift": round(self.shift, precision),
            "elem": self.elem.to_dict(precision),
        }
        if self.wrapper_classes:
            data["wrapperClasses"] = list(self.wrapper_classes)
        if self.wrapper_style:
            data["wrapperStyle"] = dict(self.wrapper_style)
        return data


@dataclass(eq=False)
class VList(Box):
    """Boxes stacked vertically, bottom to top."""

    children: list[VListChild] = field(default_factory=list)

    kind = "vlist"

    def to_dict(self, precision: int = 5) -> dict[str, Any]:
        data = super().to_dict(precision)
        data["children"] = [child.to_dict(precision) for child in self.children]
        return data


@dataclass
class VListElem:
    """Input to make_vlist: a box, with ``shift`` used by individualShift."""

    elem: Box
    shift: float = 0.0
    wrapper_classes: list[str] = field(default_factory=list)
    wrapper_style: dict[str, str] = field(default_factory=dict)


@dataclass
class VListKern:
    """Input to make_vlist: vertical space, negative to overlap."""

    size: float


VListEntry = Union[VListElem, VListKern]


def make_symbol(
    value: str,
    font: str,
    mode: Mode,
    options: Options | None = None,
    classes: list[str] | None = None,
) -> SymbolBox:
    """Build a glyph box with metrics from the options' metrics table.

    A character missing from the table is laid out with zero metrics.
    """
    options = options or Options()
    metrics = options.metrics.get_character_metrics(value, font)
    symbol = SymbolBox(classes=list(classes or []), text=value, font=font)
    if metrics is None:
        logger.warning("No character metrics for %r in font %r (%s mode)", value, font, mode)
    else:
        symbol.height = metrics.height
        symbol.depth = metrics.depth
        symbol.width = metrics.width
        symbol.italic = metrics.italic
        symbol.skew = metrics.skew
    if options.color:
        symbol.style["color"] = options.color
    return symbol


def make_span(
    classes: list[str] | None = None,
    children: list[Box] | None = None,
    options: Options | None = None,
    style: dict[str, str] | None = None,
) -> Span:
    """Group boxes horizontally; height and depth are the children's maxima."""
    children = list(children or [])
    span = Span(classes=list(classes or []), children=children, style=dict(style or {}))
    if children:
        span.height = max(child.height for child in children)
        span.depth = max(child.depth for child in children)
        span.width = sum(child.width for child in children)
    if options is not None and options.color:
        span.style["color"] = options.color
    return span


def _initial_position(
    children: list[VListEntry], position_type: PositionType, position_data: float
) -> tuple[float, list[VListEntry]]:
    if position_type == "individualShift":
        old = children
        first = old[0]
        if not isinstance(first, VListElem):
            raise MalformedNodeError("elem", "kern", {"position_type": position_type})
        depth = -first.shift - first.elem.depth
        curr_pos = depth
        result: list[VListEntry] = [first]
        for prev, child in zip(old, old[1:]):
            if not isinstance(child, VListElem) or not isinstance(prev, VListElem):
                raise MalformedNodeError("elem", "kern", {"position_type": position_type})
            diff = -child.shift - curr_pos - child.elem.depth
            size = diff - (prev.elem.height + prev.elem.depth)
            curr_pos += diff
            result.append(VListKern(size))
            result.append(child)
        return depth, result

    if position_type == "bottom":
        return -position_data, children

    first = children[0]
    if not isinstance(first, VListElem):
        raise MalformedNodeError("elem", "kern", {"position_type": position_type})
    if position_type == "shift":
        return -first.elem.depth - position_data, children
    if position_type == "firstBaseline":
        return -first.elem.depth, children
    raise ValueError(f"Invalid position type: {position_type!r}")


def make_vlist(
    children: list[VListEntry],
    position_type: PositionType,
    position_data: float = 0.0,
) -> VList:
    """Stack boxes bottom to top.

    ``position_type`` fixes where the list's baseline falls:

    - ``firstBaseline``: at the baseline of the first (bottom) box
    - ``shift``: the first box's baseline lowered by ``position_data``
    - ``bottom``: ``position_data`` above the bottom of the list
    - ``individualShift``: each element gives its own downward ``shift``
    """
    if not children:
        raise ValueError("make_vlist needs at least one child")
    depth, entries = _initial_position(children, position_type, position_data)

    curr_pos = min_pos = max_pos = depth
    placed: list[VListChild] = []
    for entry in entries:
        if isinstance(entry, VListKern):
            curr_pos += entry.size
        else:
            elem = entry.elem
            placed.append(
                VListChild(
                    elem=elem,
                    shift=curr_pos + elem.depth,
                    wrapper_classes=list(entry.wrapper_classes),
                    wrapper_style=dict(entry.wrapper_style),
                )
            )
            curr_pos += elem.height + elem.depth
        min_pos = min(min_pos, curr_pos)
        max_pos = max(max_pos, curr_pos)

    width = max((child.elem.width for child in placed), default=0.0)
    return VList(
        classes=["vlist"],
        children=placed,
        height=max_pos,
        depth=-min_pos,
        width=width,
    )
