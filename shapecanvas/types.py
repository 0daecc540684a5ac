"""Data types for ShapeCanvas diagrams.

This module contains the core data structures shared by the canvas model,
the geometry helpers and the interaction controllers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .constants import DEFAULT_ITEM_HEIGHT, DEFAULT_ITEM_WIDTH


class ShapeKind(Enum):
    """Shape templates offered by the palette."""

    RECTANGLE = "Rectangle"
    ELLIPSE = "Ellipse"
    DIAMOND = "Diamond"
    PARALLELOGRAM = "Parallelogram"
    ARROW = "Arrow"
    CYLINDER = "Cylinder"
    CLOUD = "Cloud"
    STICKMAN = "Stickman"
    DOCUMENT = "Document"
    DATABASE = "Database"
    DECISION = "Decision"
    INPUT_OUTPUT = "InputOutput"


class ConnectorSide(Enum):
    """Side of an item a connector attaches to."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Point:
    """A point in canvas-local coordinates."""

    x: float
    y: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass
class CanvasItem:
    """A placed shape; (x, y) is the top-left corner."""

    id: int
    kind: ShapeKind
    x: float
    y: float
    width: float = DEFAULT_ITEM_WIDTH
    height: float = DEFAULT_ITEM_HEIGHT


@dataclass
class Connection:
    """A directed connection between two canvas items."""

    from_id: int
    to_id: int
