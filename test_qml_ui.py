"""Regression tests for the QML render layer wiring."""

import re
from pathlib import Path

QML_PATH = Path("shapecanvas/qml_ui/ShapeCanvasWindow.qml")


def _read_qml() -> str:
    return QML_PATH.read_text(encoding="utf-8")


def test_every_gesture_area_ends_gesture_on_cancel():
    qml = _read_qml()
    released = re.findall(r"onReleased: \(mouse\) => root\.forwardRelease\((\w+),", qml)
    assert sorted(released) == ["bodyMouse", "dividerMouse", "resizeMouse"]
    assert qml.count("onCanceled: root.cancelGesture()") == len(released)


def test_palette_entries_stay_in_place_while_dragged():
    qml = _read_qml()
    assert "drag.target" not in qml
    assert "Drag.active: paletteMouse.pressed" in qml


def test_connectors_draw_arrowheads():
    assert "modelData.arrowPath" in _read_qml()
