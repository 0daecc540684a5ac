"""Controller-private interaction state.

The selection is shared by the gesture controller (which sets it on an item
press) and the keyboard controller (which consumes it on delete). It lives
outside CanvasModel and emits nothing when it changes, so selecting an item
does not trigger a repaint.
"""

from __future__ import annotations

from typing import Optional


class InteractionState:
    """Holds the single selection reference."""

    def __init__(self) -> None:
        self.selected_id: Optional[int] = None

    def select(self, item_id: int) -> None:
        self.selected_id = item_id

    def clear(self) -> None:
        self.selected_id = None

    def is_selected(self, item_id: int) -> bool:
        return self.selected_id is not None and self.selected_id == item_id
