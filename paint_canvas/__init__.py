"""
Paint Canvas

Freehand and shape painting on a 2D surface driven by pointer drags.
"""

__version__ = "1.0.0"

from .config import Config
from .core import (
    Coordinate,
    to_local,
    ShapeKind,
    Segment,
    Circle,
    Square,
    create_shape,
    LineJoin,
    StyleSpec,
    render,
    PaintSession,
    SessionState,
)

__all__ = [
    'Config',
    'Coordinate',
    'to_local',
    'ShapeKind',
    'Segment',
    'Circle',
    'Square',
    'create_shape',
    'LineJoin',
    'StyleSpec',
    'render',
    'PaintSession',
    'SessionState',
]
