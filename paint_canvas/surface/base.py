"""
Abstract drawing surface and drawing context.

A DrawingContext mirrors a 2D canvas stroking API: style attributes are
assigned, a path is built with begin_path/move_to/line_to/arc/rect and
committed with stroke(). Contexts are context managers; leaving the
block releases whatever the context holds open on the surface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..core.coordinate import Coordinate


class DrawingContext(ABC):
    """2D stroke-capable drawing context."""

    line_width: float
    stroke_style: str
    line_join: str

    def __enter__(self) -> 'DrawingContext':
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        return False

    @abstractmethod
    def begin_path(self):
        pass

    @abstractmethod
    def move_to(self, x: float, y: float):
        pass

    @abstractmethod
    def line_to(self, x: float, y: float):
        pass

    @abstractmethod
    def arc(self, x: float, y: float, radius: float, start_angle: float, end_angle: float):
        """Add a clockwise arc (radians, y-down) centered at (x, y)."""
        pass

    @abstractmethod
    def rect(self, x: float, y: float, width: float, height: float):
        pass

    @abstractmethod
    def stroke(self):
        """Stroke the current path with the current style attributes."""
        pass


class DrawingSurface(ABC):
    """Drawing area that can hand out a drawing context."""

    @property
    @abstractmethod
    def origin(self) -> Coordinate:
        """Position of the surface's top-left corner in device space."""
        pass

    @abstractmethod
    def get_context(self) -> Optional[DrawingContext]:
        """Return a drawing context, or None if the surface is not usable."""
        pass


__all__ = ['DrawingContext', 'DrawingSurface']
