"""Pointer gesture state machine for ShapeCanvas.

The controller interprets raw pointer events from the render layer and is the
only writer of CanvasModel while a gesture is live. Drag-style gestures
(sidebar resize, item drag, item resize) subscribe to the window-wide pointer
source when they start and unsubscribe when the pointer is released, wherever
the release happens. Connector creation is a separate two-click protocol that
does not track pointer motion.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from PySide6.QtCore import QObject, Signal, Slot

from .model import NO_ITEM, CanvasModel
from .payload import DragPayloadError, decode_drag_payload, encode_drag_payload
from .selection import InteractionState
from .types import Point, ShapeKind

logger = logging.getLogger(__name__)

PointerHandler = Callable[[float, float], None]


class GestureState(Enum):
    IDLE = "idle"
    RESIZING_SIDEBAR = "resizing-sidebar"
    DRAGGING_ITEM = "dragging-item"
    RESIZING_ITEM = "resizing-item"
    CONNECTING_FROM = "connecting-from"


class PointerRegion(Enum):
    """UI region a pointer press originated from."""

    SIDEBAR_DIVIDER = "sidebar-divider"
    ITEM_BODY = "item-body"
    RESIZE_HANDLE = "resize-handle"
    CONNECTOR_HANDLE = "connector-handle"
    CANVAS_BACKGROUND = "canvas-background"


class PointerEventSource(QObject):
    """Window-wide pointer move/release events, in window coordinates."""

    moved = Signal(float, float)
    released = Signal(float, float)

    @Slot(float, float)
    def move(self, x: float, y: float) -> None:
        self.moved.emit(x, y)

    @Slot(float, float)
    def release(self, x: float, y: float) -> None:
        self.released.emit(x, y)


class ListenerScope:
    """A move/release subscription on a PointerEventSource.

    At most one pair of handlers is attached at a time; release() detaches
    them and is safe to call when nothing is attached.
    """

    def __init__(self, source: PointerEventSource):
        self._source = source
        self._on_move: Optional[PointerHandler] = None
        self._on_release: Optional[PointerHandler] = None

    @property
    def active(self) -> bool:
        return self._on_move is not None

    def acquire(self, on_move: PointerHandler, on_release: PointerHandler) -> None:
        self.release()
        self._source.moved.connect(on_move)
        self._source.released.connect(on_release)
        self._on_move = on_move
        self._on_release = on_release

    def release(self) -> None:
        if self._on_move is not None:
            self._source.moved.disconnect(self._on_move)
        if self._on_release is not None:
            self._source.released.disconnect(self._on_release)
        self._on_move = None
        self._on_release = None


class GestureController(QObject):
    """Drives drag, resize, sidebar and connector gestures against a model."""

    def __init__(
        self,
        model: CanvasModel,
        pointer_source: PointerEventSource,
        interaction: Optional[InteractionState] = None,
        parent=None,
    ):
        super().__init__(parent)
        self._model = model
        self._pointer_source = pointer_source
        self._interaction = interaction if interaction is not None else InteractionState()
        self._listeners = ListenerScope(pointer_source)
        self._canvas_origin = Point(0.0, 0.0)
        self._state = GestureState.IDLE
        self._item_id: int = NO_ITEM
        self._grab_offset = Point(0.0, 0.0)
        self._last_pointer = Point(0.0, 0.0)
        model.itemsChanged.connect(self._on_items_changed)

    # --- State --------------------------------------------------------------
    @property
    def state(self) -> GestureState:
        if self._state != GestureState.IDLE:
            return self._state
        if self._model.connecting_from() is not None:
            return GestureState.CONNECTING_FROM
        return GestureState.IDLE

    @property
    def interaction(self) -> InteractionState:
        return self._interaction

    @property
    def listening(self) -> bool:
        return self._listeners.active

    @Slot(result=str)
    def currentState(self) -> str:
        return self.state.value

    @Slot(result=int)
    def selectedItemId(self) -> int:
        selected = self._interaction.selected_id
        return NO_ITEM if selected is None else selected

    @Slot(int, result=bool)
    def isSelected(self, item_id: int) -> bool:
        return self._interaction.is_selected(item_id)

    @Slot(float, float)
    def setCanvasOrigin(self, x: float, y: float) -> None:
        self._canvas_origin = Point(x, y)

    # --- Pointer presses ----------------------------------------------------
    @Slot(str, int, float, float)
    def pointerPressed(self, region: str, item_id: int, x: float, y: float) -> None:
        try:
            pressed = PointerRegion(region)
        except ValueError:
            logger.warning("Ignoring press on unknown region %r", region)
            return

        if pressed == PointerRegion.SIDEBAR_DIVIDER:
            self._begin(GestureState.RESIZING_SIDEBAR, self._on_sidebar_move)
        elif pressed == PointerRegion.ITEM_BODY:
            self._begin_item_drag(item_id, x, y)
        elif pressed == PointerRegion.RESIZE_HANDLE:
            self._begin_item_resize(item_id, x, y)
        # Connector handles act on click (connectorClicked); the background
        # press starts nothing.

    def _begin_item_drag(self, item_id: int, x: float, y: float) -> None:
        item = self._model.getItem(item_id)
        if item is None:
            return
        self._interaction.select(item_id)
        self._item_id = item_id
        self._grab_offset = Point(
            x - (self._canvas_origin.x + item.x),
            y - (self._canvas_origin.y + item.y),
        )
        self._begin(GestureState.DRAGGING_ITEM, self._on_drag_move)

    def _begin_item_resize(self, item_id: int, x: float, y: float) -> None:
        if self._model.getItem(item_id) is None:
            return
        self._item_id = item_id
        self._last_pointer = Point(x, y)
        self._begin(GestureState.RESIZING_ITEM, self._on_resize_move)

    def _begin(self, state: GestureState, on_move: PointerHandler) -> None:
        if self._listeners.active:
            logger.warning("%s gesture never saw a release; ending it", self._state.value)
            self._listeners.release()
        self._state = state
        self._listeners.acquire(on_move, self._on_release)
        logger.debug("Gesture started: %s", state.value)

    # --- Live gesture handlers ----------------------------------------------
    def _on_sidebar_move(self, x: float, y: float) -> None:
        self._model.setSidebarWidth(x)

    def _on_drag_move(self, x: float, y: float) -> None:
        self._model.moveItem(
            self._item_id,
            x - self._canvas_origin.x - self._grab_offset.x,
            y - self._canvas_origin.y - self._grab_offset.y,
        )

    def _on_resize_move(self, x: float, y: float) -> None:
        # Deltas are taken from the previous move, not the press position.
        item = self._model.getItem(self._item_id)
        if item is not None:
            dx = x - self._last_pointer.x
            dy = y - self._last_pointer.y
            self._model.resizeItem(self._item_id, item.width + dx, item.height + dy)
        self._last_pointer = Point(x, y)

    def _on_release(self, x: float, y: float) -> None:
        self._end_gesture()

    def _end_gesture(self) -> None:
        self._listeners.release()
        logger.debug("Gesture ended: %s", self._state.value)
        self._state = GestureState.IDLE
        self._item_id = NO_ITEM

    def _on_items_changed(self) -> None:
        # The renderer drops a deleted item's pointer grab without a release.
        if self._state not in (GestureState.DRAGGING_ITEM, GestureState.RESIZING_ITEM):
            return
        if self._model.getItem(self._item_id) is None:
            self._end_gesture()

    # --- Connector protocol -------------------------------------------------
    @Slot(int)
    def connectorClicked(self, item_id: int) -> None:
        if self._model.getItem(item_id) is None:
            return
        source = self._model.connecting_from()
        if source is None:
            self._model.setConnectingFrom(item_id)
            logger.debug("Connecting from %d", item_id)
        elif source != item_id:
            self._model.addConnection(source, item_id)
            self._model.clearConnectingFrom()

    # --- Palette drag & drop ------------------------------------------------
    @Slot(str, result=str)
    def dragStartPayload(self, kind: str) -> str:
        try:
            return encode_drag_payload(ShapeKind(kind))
        except ValueError:
            logger.warning("Unknown palette shape %r", kind)
            return ""

    @Slot(str, float, float, result=int)
    def handleDrop(self, raw: str, x: float, y: float) -> int:
        """Create an item from drop data at window position (x, y)."""
        try:
            kind = decode_drag_payload(raw)
        except DragPayloadError as exc:
            logger.warning("Invalid drag data: %s", exc)
            return NO_ITEM
        if kind is None:
            logger.debug("Ignoring non-shape drop payload")
            return NO_ITEM
        return self._model.add_item(
            kind,
            x - self._canvas_origin.x,
            y - self._canvas_origin.y,
        )
