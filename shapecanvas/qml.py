"""QML UI definition for ShapeCanvas."""

from __future__ import annotations

from pathlib import Path

QML_DIR = Path(__file__).with_name("qml_ui")
SHAPECANVAS_QML_PATH = QML_DIR / "ShapeCanvasWindow.qml"


__all__ = [
    "QML_DIR",
    "SHAPECANVAS_QML_PATH",
]
