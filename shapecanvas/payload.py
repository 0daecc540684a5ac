"""Palette drag payload encoding.

The palette serializes the dragged template as JSON text,
``{"data": "<shape name>", "type": "shape"}``, and the canvas decodes it on
drop.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from .constants import SHAPE_PAYLOAD_TYPE
from .types import ShapeKind


class DragPayloadError(ValueError):
    """Raised when drop data cannot be decoded into a payload."""


def encode_drag_payload(kind: ShapeKind) -> str:
    return json.dumps({"data": kind.value, "type": SHAPE_PAYLOAD_TYPE})


def decode_drag_payload(raw: str) -> Optional[ShapeKind]:
    """Decode drop data.

    Returns the shape kind for a shape payload, or None for a well-formed
    payload of another type. Raises DragPayloadError for anything else.
    """
    try:
        payload: Any = json.loads(raw)
    except (ValueError, TypeError, RecursionError) as exc:
        raise DragPayloadError(f"Unparseable drag data: {raw!r}") from exc
    if not isinstance(payload, dict):
        raise DragPayloadError(f"Drag data is not an object: {raw!r}")
    fields: Dict[str, Any] = payload
    if fields.get("type") != SHAPE_PAYLOAD_TYPE:
        return None
    try:
        return ShapeKind(fields.get("data"))
    except ValueError as exc:
        raise DragPayloadError(f"Unknown shape kind: {fields.get('data')!r}") from exc
