"""Core CanvasModel class for ShapeCanvas.

This module provides the Qt model holding canvas items, connections, the
in-progress connection source and the sidebar width. It is the single
writable source of truth; only the gesture and keyboard controllers mutate it.
"""

from __future__ import annotations

import logging
from itertools import count
from typing import Any, Dict, List, Optional

from PySide6.QtCore import (
    QAbstractListModel,
    QModelIndex,
    Property,
    Qt,
    Signal,
    Slot,
)

from .constants import (
    DEFAULT_ITEM_HEIGHT,
    DEFAULT_ITEM_WIDTH,
    DEFAULT_SIDEBAR_WIDTH,
    MIN_ITEM_SIZE,
    SIDEBAR_MAX_WIDTH,
    SIDEBAR_MIN_WIDTH,
)
from .geometry import arrowhead, connection_path, path_to_svg
from .types import CanvasItem, Connection, ShapeKind

logger = logging.getLogger(__name__)

NO_ITEM = -1


def clamp_sidebar_width(width: float) -> float:
    return max(SIDEBAR_MIN_WIDTH, min(SIDEBAR_MAX_WIDTH, width))


class CanvasModel(QAbstractListModel):
    """Qt model exposing canvas items and connections to QML."""

    IdRole = Qt.UserRole + 1
    KindRole = Qt.UserRole + 2
    XRole = Qt.UserRole + 3
    YRole = Qt.UserRole + 4
    WidthRole = Qt.UserRole + 5
    HeightRole = Qt.UserRole + 6

    itemsChanged = Signal()
    connectionsChanged = Signal()
    connectionPathsChanged = Signal()
    sidebarWidthChanged = Signal()
    connectingFromChanged = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._items: List[CanvasItem] = []
        self._connections: List[Connection] = []
        self._id_source = count(1)
        self._connecting_from: Optional[int] = None
        self._sidebar_width: float = DEFAULT_SIDEBAR_WIDTH

    def _row_of(self, item_id: int) -> int:
        for row, item in enumerate(self._items):
            if item.id == item_id:
                return row
        return -1

    def _emit_row_changed(self, row: int, roles: List[int]) -> None:
        index = self.index(row, 0)
        self.dataChanged.emit(index, index, roles)
        self.itemsChanged.emit()
        self.connectionPathsChanged.emit()

    # --- Qt model overrides -------------------------------------------------
    def rowCount(self, parent: QModelIndex | None = QModelIndex()) -> int:  # type: ignore[override]
        return len(self._items)

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole):  # type: ignore[override]
        if not index.isValid() or not (0 <= index.row() < len(self._items)):
            return None

        item = self._items[index.row()]
        if role == self.IdRole:
            return item.id
        if role == self.KindRole:
            return item.kind.value
        if role == self.XRole:
            return item.x
        if role == self.YRole:
            return item.y
        if role == self.WidthRole:
            return item.width
        if role == self.HeightRole:
            return item.height
        return None

    def roleNames(self) -> Dict[int, bytes]:  # type: ignore[override]
        return {
            self.IdRole: b"itemId",
            self.KindRole: b"kind",
            self.XRole: b"x",
            self.YRole: b"y",
            self.WidthRole: b"width",
            self.HeightRole: b"height",
        }

    # --- Properties exposed to QML -----------------------------------------
    @Property(int, notify=itemsChanged)
    def count(self) -> int:
        return len(self._items)

    @Property(list, notify=itemsChanged)
    def items(self) -> List[Dict[str, Any]]:
        return [self._snapshot(item) for item in self._items]

    @Property(list, notify=connectionsChanged)
    def connections(self) -> List[Dict[str, int]]:
        return [{"fromId": conn.from_id, "toId": conn.to_id} for conn in self._connections]

    @Property(list, notify=connectionPathsChanged)
    def connectionPaths(self) -> List[Dict[str, Any]]:
        """Resolve every connection to its elbow polyline.

        Connections whose endpoints are not on the canvas are skipped.
        """
        by_id = {item.id: item for item in self._items}
        paths = []
        for conn in self._connections:
            source = by_id.get(conn.from_id)
            target = by_id.get(conn.to_id)
            if source is None or target is None:
                continue
            points = connection_path(source, target)
            paths.append({
                "fromId": conn.from_id,
                "toId": conn.to_id,
                "points": [pt.to_dict() for pt in points],
                "svgPath": path_to_svg(points),
                "arrowPath": path_to_svg(arrowhead(points[-2], points[-1]), closed=True),
            })
        return paths

    @Property(float, notify=sidebarWidthChanged)
    def sidebarWidth(self) -> float:
        return self._sidebar_width

    @Property(int, notify=connectingFromChanged)
    def connectingFrom(self) -> int:
        return NO_ITEM if self._connecting_from is None else self._connecting_from

    # --- Item management ----------------------------------------------------
    def add_item(self, kind: ShapeKind, x: float, y: float) -> int:
        item = CanvasItem(
            id=next(self._id_source),
            kind=kind,
            x=x,
            y=y,
            width=DEFAULT_ITEM_WIDTH,
            height=DEFAULT_ITEM_HEIGHT,
        )
        self.beginInsertRows(QModelIndex(), len(self._items), len(self._items))
        self._items.append(item)
        self.endInsertRows()
        self.itemsChanged.emit()
        logger.debug("Added %s item %d at (%s, %s)", kind.value, item.id, x, y)
        return item.id

    @Slot(str, float, float, result=int)
    def addItem(self, kind: str, x: float, y: float) -> int:
        try:
            shape_kind = ShapeKind(kind)
        except ValueError:
            logger.warning("Unknown shape kind %r", kind)
            return NO_ITEM
        return self.add_item(shape_kind, x, y)

    @Slot(int)
    def removeItem(self, item_id: int) -> None:
        """Remove an item together with every connection touching it."""
        row = self._row_of(item_id)
        if row < 0:
            return
        self.removeConnectionsFor(item_id)
        self.beginRemoveRows(QModelIndex(), row, row)
        self._items.pop(row)
        self.endRemoveRows()
        self.itemsChanged.emit()
        self.connectionPathsChanged.emit()
        if self._connecting_from == item_id:
            self.clearConnectingFrom()
        logger.debug("Removed item %d", item_id)

    @Slot(int, float, float)
    def moveItem(self, item_id: int, x: float, y: float) -> None:
        row = self._row_of(item_id)
        if row < 0:
            return
        item = self._items[row]
        if item.x == x and item.y == y:
            return
        item.x = x
        item.y = y
        self._emit_row_changed(row, [self.XRole, self.YRole])

    @Slot(int, float, float)
    def resizeItem(self, item_id: int, width: float, height: float) -> None:
        new_width = max(MIN_ITEM_SIZE, width)
        new_height = max(MIN_ITEM_SIZE, height)
        row = self._row_of(item_id)
        if row < 0:
            return
        item = self._items[row]
        if item.width == new_width and item.height == new_height:
            return
        item.width = new_width
        item.height = new_height
        self._emit_row_changed(row, [self.WidthRole, self.HeightRole])

    # --- Connections --------------------------------------------------------
    @Slot(int, int, result=bool)
    def addConnection(self, from_id: int, to_id: int) -> bool:
        if from_id == to_id:
            return False
        self._connections.append(Connection(from_id, to_id))
        self.connectionsChanged.emit()
        self.connectionPathsChanged.emit()
        logger.debug("Connected %d -> %d", from_id, to_id)
        return True

    @Slot(int, result=int)
    def removeConnectionsFor(self, item_id: int) -> int:
        filtered = [
            conn for conn in self._connections
            if conn.from_id != item_id and conn.to_id != item_id
        ]
        removed = len(self._connections) - len(filtered)
        if removed:
            self._connections = filtered
            self.connectionsChanged.emit()
            self.connectionPathsChanged.emit()
        return removed

    # --- In-progress connection & sidebar -----------------------------------
    @Slot(int)
    def setConnectingFrom(self, item_id: int) -> None:
        if self._connecting_from == item_id:
            return
        self._connecting_from = item_id
        self.connectingFromChanged.emit()

    @Slot()
    def clearConnectingFrom(self) -> None:
        if self._connecting_from is None:
            return
        self._connecting_from = None
        self.connectingFromChanged.emit()

    def connecting_from(self) -> Optional[int]:
        return self._connecting_from

    @Slot(float)
    def setSidebarWidth(self, width: float) -> None:
        clamped = clamp_sidebar_width(width)
        if self._sidebar_width == clamped:
            return
        self._sidebar_width = clamped
        self.sidebarWidthChanged.emit()

    # --- Utilities ----------------------------------------------------------
    def getItem(self, item_id: int) -> Optional[CanvasItem]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def itemIds(self) -> List[int]:
        return [item.id for item in self._items]

    @staticmethod
    def _snapshot(item: CanvasItem) -> Dict[str, Any]:
        return {
            "id": item.id,
            "kind": item.kind.value,
            "x": item.x,
            "y": item.y,
            "width": item.width,
            "height": item.height,
        }

    @Slot(int, result="QVariant")
    def getItemSnapshot(self, item_id: int) -> Dict[str, Any]:
        item = self.getItem(item_id)
        if not item:
            return {}
        return self._snapshot(item)

    @Slot(float, float, result=int)
    def itemAt(self, x: float, y: float) -> int:
        """Return the topmost item containing the canvas point, or -1."""
        for item in reversed(self._items):
            if item.x <= x <= item.x + item.width and item.y <= y <= item.y + item.height:
                return item.id
        return NO_ITEM
