"""
MainWindow - top-level window hosting the paint canvas
"""

import logging
from typing import Dict

from PyQt6.QtWidgets import QMainWindow, QToolBar
from PyQt6.QtGui import QAction, QActionGroup, QColor

from ..config import Config
from ..core.shapes import ShapeKind
from ..core.style import StyleSpec
from .paint_canvas import PaintCanvas

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Main application window.

    Layout:
    - Toolbar: shape kind selection (Segment/Circle/Square) and Clear
    - Central: PaintCanvas
    """

    def __init__(self):
        super().__init__()

        self.setWindowTitle(f"{Config.APP_NAME} v{Config.APP_VERSION}")

        self._canvas = PaintCanvas(
            self,
            style=self._load_style(),
            shape_kind=Config.load_shape_kind(),
        )
        self._shape_actions: Dict[ShapeKind, QAction] = {}

        self._create_toolbar()
        self.setCentralWidget(self._canvas)
        self._connect_signals()
        self._update_status()

    @property
    def canvas(self) -> PaintCanvas:
        return self._canvas

    @staticmethod
    def _load_style() -> StyleSpec:
        """Stored style, with the default used if Qt cannot parse its color."""
        style = Config.load_style()
        if not QColor(style.stroke_color).isValid():
            logger.warning(f"Invalid stored stroke color {style.stroke_color!r}, using defaults")
            return Config.get_default_style()
        return style

    def _create_toolbar(self):
        """Create shape and clear actions."""
        toolbar = QToolBar("Tools", self)
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        group = QActionGroup(self)
        group.setExclusive(True)
        current_kind = self._canvas.session.shape_kind

        for kind in ShapeKind:
            action = QAction(kind.value.capitalize(), self)
            action.setCheckable(True)
            action.setChecked(kind == current_kind)
            action.triggered.connect(lambda checked, k=kind: self._on_shape_kind_selected(k))
            group.addAction(action)
            toolbar.addAction(action)
            self._shape_actions[kind] = action

        toolbar.addSeparator()

        clear_action = QAction("Clear", self)
        clear_action.setShortcut("Ctrl+N")
        clear_action.triggered.connect(self._canvas.clear)
        toolbar.addAction(clear_action)

    def _connect_signals(self):
        self._canvas.drawing_finished.connect(self._update_status)

    def _on_shape_kind_selected(self, kind: ShapeKind):
        """Switch the canvas shape kind and remember it."""
        self._canvas.set_shape_kind(kind)
        Config.save_paint_settings({'shape_kind': kind.value})
        logger.info(f"Shape kind set to {kind.value}")
        self._update_status()

    def _update_status(self):
        session = self._canvas.session
        style = session.style
        self.statusBar().showMessage(
            f"Shape: {session.shape_kind.value}  |  "
            f"Color: {style.stroke_color}  |  "
            f"Join: {style.line_join.value}  |  "
            f"Width: {style.line_width:g}"
        )


__all__ = ['MainWindow']
