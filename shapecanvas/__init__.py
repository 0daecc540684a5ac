"""ShapeCanvas diagram editor built with PySide6 and QML.

Palette shapes are dropped onto a canvas, then moved, resized and linked by
directional elbow connectors. The pointer gesture state machine and the
canvas model live here; QML only paints the model and forwards input.
"""

from .constants import SHAPE_PRESETS
from .gestures import GestureController, GestureState, ListenerScope, PointerEventSource, PointerRegion
from .geometry import arrowhead, connection_path, connector_anchor, elbow_path, path_to_svg
from .keyboard import KeyboardController
from .model import CanvasModel
from .payload import DragPayloadError, decode_drag_payload, encode_drag_payload
from .selection import InteractionState
from .types import CanvasItem, Connection, ConnectorSide, Point, ShapeKind
from .ui import create_shapecanvas_window, main

__all__ = [
    "CanvasItem",
    "CanvasModel",
    "Connection",
    "ConnectorSide",
    "DragPayloadError",
    "GestureController",
    "GestureState",
    "InteractionState",
    "KeyboardController",
    "ListenerScope",
    "Point",
    "PointerEventSource",
    "PointerRegion",
    "SHAPE_PRESETS",
    "arrowhead",
    "ShapeKind",
    "connection_path",
    "connector_anchor",
    "create_shapecanvas_window",
    "decode_drag_payload",
    "elbow_path",
    "encode_drag_payload",
    "main",
    "path_to_svg",
]
