"""Keyboard handling for ShapeCanvas.

KeyboardController is installed as an application-wide event filter, so the
delete key reaches it no matter which item has focus.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import QEvent, QObject, Qt, Slot

from .constants import DELETE_KEYS
from .model import CanvasModel
from .selection import InteractionState

logger = logging.getLogger(__name__)

KEY_NAMES = {
    int(Qt.Key_Delete): "Delete",
}


class KeyboardController(QObject):
    """Deletes the selected item and its connections."""

    def __init__(self, model: CanvasModel, interaction: InteractionState, parent=None):
        super().__init__(parent)
        self._model = model
        self._interaction = interaction

    @Slot(str, result=bool)
    def handleKeyPress(self, key: str) -> bool:
        if key not in DELETE_KEYS:
            return False
        item_id = self._interaction.selected_id
        if item_id is None:
            return False
        self._model.removeItem(item_id)
        self._interaction.clear()
        logger.debug("Deleted item %d", item_id)
        return True

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # type: ignore[override]
        if event.type() == QEvent.KeyPress:
            key_name = KEY_NAMES.get(int(event.key()))
            if key_name is not None:
                return self.handleKeyPress(key_name)
        return super().eventFilter(watched, event)
