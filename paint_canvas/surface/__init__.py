"""
Drawing surfaces for the painting engine.

- base: Abstract DrawingContext / DrawingSurface interfaces
- drawing_context: QPainter implementation of the drawing context
- image_surface: QImage-backed persistent drawing surface
"""

from .base import DrawingContext, DrawingSurface
from .drawing_context import QPainterContext
from .image_surface import ImageSurface

__all__ = [
    'DrawingContext',
    'DrawingSurface',
    'QPainterContext',
    'ImageSurface',
]
