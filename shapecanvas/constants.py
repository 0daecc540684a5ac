"""Constants and presets for ShapeCanvas."""

from typing import Tuple

DEFAULT_ITEM_WIDTH = 80.0
DEFAULT_ITEM_HEIGHT = 50.0
MIN_ITEM_SIZE = 20.0

DEFAULT_SIDEBAR_WIDTH = 260.0
SIDEBAR_MIN_WIDTH = 150.0
SIDEBAR_MAX_WIDTH = 500.0

# Palette drag payload: {"data": <shape name>, "type": "shape"}
DRAG_MIME_TYPE = "text/plain"
SHAPE_PAYLOAD_TYPE = "shape"

DELETE_KEYS: Tuple[str, ...] = ("Delete",)

SMOKE_ENV_VAR = "SHAPECANVAS_SMOKE"
DEBUG_ENV_VAR = "SHAPECANVAS_DEBUG"

# Palette order as shown in the sidebar.
SHAPE_PRESETS: Tuple[str, ...] = (
    "Rectangle",
    "Ellipse",
    "Diamond",
    "Parallelogram",
    "Arrow",
    "Cylinder",
    "Cloud",
    "Stickman",
    "Document",
    "Database",
    "Decision",
    "InputOutput",
)
