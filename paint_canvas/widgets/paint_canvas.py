"""
PaintCanvas - drawing widget hosting the painting engine

Owns the QImage-backed surface and the PaintSession, and wires mouse
events to the session:
- Left button press -> start_session
- Mouse move        -> extend_session
- Left button release / pointer leaving the widget -> end_session
"""

import logging
from typing import Optional, Union

from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, pyqtSignal, QPoint, QSize
from PyQt6.QtGui import QPainter

from ..config import Config
from ..core.coordinate import Coordinate, to_local
from ..core.paint_session import PaintSession
from ..core.shapes import Shape, ShapeKind
from ..core.style import StyleSpec
from ..surface.image_surface import ImageSurface

logger = logging.getLogger(__name__)


class PaintCanvas(QWidget):
    """
    Widget that paints shapes under the dragged pointer.

    The painted image persists across repaints; each mouse move while
    the left button is held paints one more shape increment into it.
    """

    # Signals
    drawing_started = pyqtSignal()
    drawing_finished = pyqtSignal()
    shape_rendered = pyqtSignal(str)  # shape kind value

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        style: Optional[StyleSpec] = None,
        shape_kind: Union[ShapeKind, str, None] = None,
    ):
        super().__init__(parent)

        self._surface = ImageSurface(background=Config.BACKGROUND_COLOR)
        self._session = PaintSession(self._surface, style=style, shape_kind=shape_kind)
        self._session.on_shape_rendered = self._on_shape_rendered

        self._setup_widget()

    def _setup_widget(self):
        """Configure the widget."""
        self.setMouseTracking(True)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent)
        self.setMinimumSize(Config.MIN_WINDOW_WIDTH, Config.MIN_WINDOW_HEIGHT)
        self.setCursor(Qt.CursorShape.CrossCursor)

    # ==================== Properties ====================

    @property
    def session(self) -> PaintSession:
        return self._session

    @property
    def surface(self) -> ImageSurface:
        return self._surface

    # ==================== Policy knobs ====================

    def set_style(self, style: StyleSpec):
        """Set the style used for subsequent shapes."""
        self._session.configure_style(style)

    def set_shape_kind(self, kind: Union[ShapeKind, str]):
        """Set the shape kind used for subsequent shapes."""
        self._session.configure_shape_kind(kind)

    def clear(self):
        """Wipe the drawing."""
        self._surface.clear()
        self.update()

    # ==================== Coordinate Conversion ====================

    def _surface_origin(self) -> Coordinate:
        """Top-left corner of the widget in global (device) coordinates."""
        origin = self.mapToGlobal(QPoint(0, 0))
        return Coordinate(float(origin.x()), float(origin.y()))

    def _event_to_local(self, event) -> Coordinate:
        """Convert a mouse event's global position to surface-local space."""
        device = event.globalPosition()
        return to_local(Coordinate(device.x(), device.y()), self._surface.origin)

    # ==================== Mouse Events ====================

    def mousePressEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return

        if not self._surface.is_attached:
            # Nothing to paint on yet
            super().mousePressEvent(event)
            return

        # The window may have moved since the last stroke
        self._surface.origin = self._surface_origin()
        self._session.start_session(self._event_to_local(event))
        self.drawing_started.emit()
        event.accept()

    def mouseMoveEvent(self, event):
        if self._session.is_active:
            # Qt grabs the mouse while the button is held, so no Leave
            # arrives until release; check the rect instead
            if not self.rect().contains(event.position().toPoint()):
                self._finish_stroke()
            else:
                self._session.extend_session(self._event_to_local(event))
            event.accept()
        else:
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        if self._session.is_active and event.button() == Qt.MouseButton.LeftButton:
            self._finish_stroke()
            event.accept()
        else:
            super().mouseReleaseEvent(event)

    def leaveEvent(self, event):
        """End the stroke when the pointer leaves the canvas."""
        if self._session.is_active:
            self._finish_stroke()
        super().leaveEvent(event)

    def _finish_stroke(self):
        self._session.end_session()
        self.drawing_finished.emit()

    def _on_shape_rendered(self, shape: Shape, style: StyleSpec):
        self.update()
        self.shape_rendered.emit(shape.kind.value)

    # ==================== Painting & Resize ====================

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), self._surface.background)
        if self._surface.is_attached:
            painter.drawImage(0, 0, self._surface.image)
        painter.end()

    def resizeEvent(self, event):
        """Grow the surface to cover the widget."""
        super().resizeEvent(event)
        self._surface.resize(self.width(), self.height())
        self._surface.origin = self._surface_origin()

    def sizeHint(self) -> QSize:
        """Fill the available screen area by default."""
        screen = self.screen()
        if screen is not None:
            return screen.availableGeometry().size()
        return QSize(800, 600)


__all__ = ['PaintCanvas']
