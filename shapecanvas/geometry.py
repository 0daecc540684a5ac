"""Connector geometry for ShapeCanvas.

Pure functions deriving connector anchors and connector routes from item
positions. Routing is a single fixed elbow: the path leaves the source
horizontally, turns once at the horizontal midpoint and enters the target
horizontally. It does not avoid other items.
"""

from __future__ import annotations

import math
from typing import List, Sequence

from .types import CanvasItem, ConnectorSide, Point

ARROW_LENGTH = 9.0
ARROW_HALF_WIDTH = 3.0


def connector_anchor(item: CanvasItem, side: ConnectorSide) -> Point:
    """Return the midpoint of the item's left or right edge."""
    mid_y = item.y + item.height / 2
    if side == ConnectorSide.LEFT:
        return Point(item.x, mid_y)
    return Point(item.x + item.width, mid_y)


def elbow_path(p1: Point, p2: Point) -> List[Point]:
    """Return the 4-point polyline p1 -> (midX, p1.y) -> (midX, p2.y) -> p2."""
    mid_x = (p1.x + p2.x) / 2
    return [p1, Point(mid_x, p1.y), Point(mid_x, p2.y), p2]


def connection_path(source: CanvasItem, target: CanvasItem) -> List[Point]:
    """Route from the source's right anchor to the target's left anchor."""
    return elbow_path(
        connector_anchor(source, ConnectorSide.RIGHT),
        connector_anchor(target, ConnectorSide.LEFT),
    )


def arrowhead(tail: Point, tip: Point) -> List[Point]:
    """Return the triangle [base, tip, base] of an arrow pointing from tail to tip.

    A degenerate final segment points the arrow along +x.
    """
    dx = tip.x - tail.x
    dy = tip.y - tail.y
    length = math.hypot(dx, dy)
    if length == 0:
        ux, uy = 1.0, 0.0
    else:
        ux, uy = dx / length, dy / length
    base_x = tip.x - ux * ARROW_LENGTH
    base_y = tip.y - uy * ARROW_LENGTH
    return [
        Point(base_x - uy * ARROW_HALF_WIDTH, base_y + ux * ARROW_HALF_WIDTH),
        tip,
        Point(base_x + uy * ARROW_HALF_WIDTH, base_y - ux * ARROW_HALF_WIDTH),
    ]


def _fmt(value: float) -> str:
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def path_to_svg(points: Sequence[Point], closed: bool = False) -> str:
    """Format a polyline as SVG path data ("M x,y L x,y ...")."""
    if not points:
        return ""
    head, *rest = points
    parts = [f"M{_fmt(head.x)},{_fmt(head.y)}"]
    parts.extend(f"L{_fmt(pt.x)},{_fmt(pt.y)}" for pt in rest)
    if closed:
        parts.append("Z")
    return " ".join(parts)
