"""
QPainter-backed drawing context.

Maps the canvas-style stroking API onto QPainter, QPainterPath and QPen.
"""

import logging
import math
from typing import Optional

from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QPainter, QPainterPath, QPaintDevice, QPen, QColor

from .base import DrawingContext

logger = logging.getLogger(__name__)


class QPainterContext(DrawingContext):
    """
    Drawing context painting onto a QPaintDevice (QImage, QPixmap, ...).

    A QPainter is opened on entering the context and ended on exit, so
    every render call leaves the device unlocked.
    """

    JOIN_STYLES = {
        'miter': Qt.PenJoinStyle.MiterJoin,
        'round': Qt.PenJoinStyle.RoundJoin,
        'bevel': Qt.PenJoinStyle.BevelJoin,
    }

    def __init__(self, device: QPaintDevice, antialiasing: bool = True):
        self._device = device
        self._antialiasing = antialiasing
        self._painter: Optional[QPainter] = None
        self._path = QPainterPath()

        self._pen = QPen(QColor('black'), 1.0)
        self._pen.setCapStyle(Qt.PenCapStyle.FlatCap)
        self._pen.setJoinStyle(Qt.PenJoinStyle.MiterJoin)

        self._line_width = 1.0
        self._stroke_style = 'black'
        self._line_join = 'miter'

    def __enter__(self) -> 'QPainterContext':
        self._painter = QPainter(self._device)
        if self._antialiasing:
            self._painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if self._painter is not None:
            self._painter.end()
            self._painter = None
        return False

    # ==================== Style attributes ====================

    @property
    def pen(self) -> QPen:
        return QPen(self._pen)

    @property
    def line_width(self) -> float:
        return self._line_width

    @line_width.setter
    def line_width(self, value: float):
        if value <= 0:
            return
        self._line_width = float(value)
        self._pen.setWidthF(self._line_width)

    @property
    def stroke_style(self) -> str:
        return self._stroke_style

    @stroke_style.setter
    def stroke_style(self, value: str):
        color = QColor(value)
        if not color.isValid():
            logger.warning(f"Invalid stroke color {value!r}, keeping {self._stroke_style!r}")
            return
        self._stroke_style = value
        self._pen.setColor(color)

    @property
    def line_join(self) -> str:
        return self._line_join

    @line_join.setter
    def line_join(self, value: str):
        join_style = self.JOIN_STYLES.get(value)
        if join_style is None:
            return
        self._line_join = value
        self._pen.setJoinStyle(join_style)

    # ==================== Path commands ====================

    def begin_path(self):
        self._path = QPainterPath()

    def move_to(self, x: float, y: float):
        self._path.moveTo(x, y)

    def line_to(self, x: float, y: float):
        self._path.lineTo(x, y)

    def arc(self, x: float, y: float, radius: float, start_angle: float, end_angle: float):
        # Qt measures degrees counter-clockwise on screen; canvas arcs run clockwise
        bounds = QRectF(x - radius, y - radius, 2 * radius, 2 * radius)
        qt_start = -math.degrees(start_angle)
        sweep = -math.degrees(end_angle - start_angle)
        if self._path.elementCount() == 0:
            self._path.arcMoveTo(bounds, qt_start)
        self._path.arcTo(bounds, qt_start, sweep)

    def rect(self, x: float, y: float, width: float, height: float):
        self._path.addRect(QRectF(x, y, width, height))

    def stroke(self):
        if self._painter is None:
            raise RuntimeError("stroke() called outside an active drawing context")
        self._painter.strokePath(self._path, self._pen)


__all__ = ['QPainterContext']
