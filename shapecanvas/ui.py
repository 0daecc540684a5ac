"""UI creation functions for ShapeCanvas."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from PySide6.QtCore import QUrl
from PySide6.QtQml import QQmlApplicationEngine

from .constants import DEBUG_ENV_VAR, SHAPE_PRESETS, SMOKE_ENV_VAR
from .gestures import GestureController, PointerEventSource
from .keyboard import KeyboardController
from .model import CanvasModel
from .qml import QML_DIR, SHAPECANVAS_QML_PATH
from .selection import InteractionState

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure logging for the application."""
    level = logging.DEBUG if debug else logging.INFO

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    logger.info("Logging initialized at %s level", "DEBUG" if debug else "INFO")


def create_shapecanvas_window(
    canvas_model: CanvasModel,
    gesture_controller: GestureController,
    keyboard_controller: KeyboardController,
    pointer_source: PointerEventSource,
) -> QQmlApplicationEngine:
    """Create and return a QQmlApplicationEngine hosting the ShapeCanvas UI."""
    engine = QQmlApplicationEngine()
    context = engine.rootContext()
    context.setContextProperty("canvasModel", canvas_model)
    context.setContextProperty("gestureController", gesture_controller)
    context.setContextProperty("keyboardController", keyboard_controller)
    context.setContextProperty("pointerSource", pointer_source)
    context.setContextProperty("shapePresets", list(SHAPE_PRESETS))
    engine.addImportPath(str(QML_DIR))
    engine.load(QUrl.fromLocalFile(str(SHAPECANVAS_QML_PATH)))
    return engine


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="ShapeCanvas diagram editor")
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--smoke', action='store_true', help='Load the UI and exit')
    args, _unknown = parser.parse_known_args(argv)
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for ShapeCanvas."""
    from PySide6.QtWidgets import QApplication

    args = _parse_args(sys.argv[1:] if argv is None else argv)
    smoke_mode = args.smoke or os.environ.get(SMOKE_ENV_VAR) == "1"
    setup_logging(debug=args.debug or os.environ.get(DEBUG_ENV_VAR) == "1")

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)

    canvas_model = CanvasModel()
    interaction = InteractionState()
    pointer_source = PointerEventSource()
    gesture_controller = GestureController(canvas_model, pointer_source, interaction)
    keyboard_controller = KeyboardController(canvas_model, interaction)
    app.installEventFilter(keyboard_controller)

    engine = create_shapecanvas_window(
        canvas_model,
        gesture_controller,
        keyboard_controller,
        pointer_source,
    )
    if not engine.rootObjects():
        logger.error("Failed to load %s", SHAPECANVAS_QML_PATH)
        return 1

    if smoke_mode:
        return 0

    return app.exec()
