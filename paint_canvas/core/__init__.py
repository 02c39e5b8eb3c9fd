"""
Painting engine core.

Framework-agnostic pieces of the painting engine:
- coordinate: Coordinate value type and device -> surface conversion
- shapes: Segment/Circle/Square primitives and the shape factory
- style: StyleSpec render style
- renderer: Shape rendering through a 2D drawing context
- paint_session: Pointer-driven paint state machine
"""

from .coordinate import Coordinate, to_local
from .shapes import ShapeKind, Segment, Circle, Square, Shape, create_shape
from .style import LineJoin, StyleSpec
from .renderer import render
from .paint_session import PaintSession, SessionState

__all__ = [
    # Coordinates
    'Coordinate',
    'to_local',
    # Shapes
    'ShapeKind',
    'Segment',
    'Circle',
    'Square',
    'Shape',
    'create_shape',
    # Style
    'LineJoin',
    'StyleSpec',
    # Rendering
    'render',
    # Session
    'PaintSession',
    'SessionState',
]
