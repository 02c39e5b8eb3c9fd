"""
Qt widgets hosting the painting engine.
"""

from .paint_canvas import PaintCanvas
from .main_window import MainWindow

__all__ = ['PaintCanvas', 'MainWindow']
