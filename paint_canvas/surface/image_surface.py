"""
QImage-backed drawing surface.

The image is the persistent drawing: shapes are painted into it one
increment at a time and the host widget blits it on repaint.
"""

import logging
from typing import Optional

from PyQt6.QtGui import QImage, QPainter, QColor

from ..config import Config
from ..core.coordinate import Coordinate
from .base import DrawingSurface
from .drawing_context import QPainterContext

logger = logging.getLogger(__name__)


class ImageSurface(DrawingSurface):
    """
    Drawing surface backed by a QImage.

    A surface with a null image (zero size, or released) is not attached:
    get_context() returns None and rendering onto it does nothing.
    """

    IMAGE_FORMAT = QImage.Format.Format_ARGB32_Premultiplied

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        origin: Optional[Coordinate] = None,
        background: str = Config.BACKGROUND_COLOR,
        antialiasing: bool = Config.ANTIALIASING,
    ):
        self._origin = origin if origin is not None else Coordinate(0.0, 0.0)
        self._background = QColor(background)
        self._antialiasing = antialiasing
        self._image = self._create_image(width, height)

    def _create_image(self, width: int, height: int) -> QImage:
        if width <= 0 or height <= 0:
            return QImage()
        image = QImage(width, height, self.IMAGE_FORMAT)
        image.fill(self._background)
        return image

    # ==================== Properties ====================

    @property
    def origin(self) -> Coordinate:
        return self._origin

    @origin.setter
    def origin(self, value: Coordinate):
        self._origin = value

    @property
    def image(self) -> QImage:
        return self._image

    @property
    def background(self) -> QColor:
        return QColor(self._background)

    @property
    def width(self) -> int:
        return self._image.width()

    @property
    def height(self) -> int:
        return self._image.height()

    @property
    def is_attached(self) -> bool:
        return not self._image.isNull()

    # ==================== Drawing ====================

    def get_context(self) -> Optional[QPainterContext]:
        if not self.is_attached:
            return None
        return QPainterContext(self._image, self._antialiasing)

    def resize(self, width: int, height: int):
        """
        Grow the backing image to at least width x height.

        Painted content is kept; the surface never shrinks so that content
        survives a window being made smaller and then larger again.
        """
        new_width = max(width, self.width)
        new_height = max(height, self.height)
        if new_width == self.width and new_height == self.height:
            return

        new_image = self._create_image(new_width, new_height)
        if new_image.isNull():
            return
        if self.is_attached:
            painter = QPainter(new_image)
            painter.drawImage(0, 0, self._image)
            painter.end()

        logger.debug(f"Surface resized to {new_width}x{new_height}")
        self._image = new_image

    def clear(self):
        """Fill the whole surface with the background color."""
        if self.is_attached:
            self._image.fill(self._background)

    def release(self):
        """Drop the backing image; later renders become no-ops."""
        self._image = QImage()

    def pixel_color(self, x: int, y: int) -> QColor:
        """Color of a single pixel (invalid QColor when out of range)."""
        if not self._image.valid(x, y):
            return QColor()
        return self._image.pixelColor(x, y)


__all__ = ['ImageSurface']
