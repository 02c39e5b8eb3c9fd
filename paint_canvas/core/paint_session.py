"""
PaintSession - pointer-driven state machine for freehand painting

Turns a stream of surface-local points into shapes: every point after the
first produces one shape spanning (last point -> new point), which is
rendered immediately. A stroke is therefore a sequence of independent
shape increments, not a single path object.

States:
    IDLE     -- start_session(P) -->  PAINTING   (last_point = P)
    PAINTING -- extend_session(Q) --> PAINTING   (render shape, last_point = Q)
    PAINTING -- end_session() -->     IDLE       (last_point cleared)

Calls that do not fit the current state are ignored.
"""

import logging
from enum import Enum
from typing import Callable, Optional, Union

from ..config import Config
from .coordinate import Coordinate
from .renderer import render
from .shapes import Shape, ShapeKind, create_shape
from .style import StyleSpec

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """Paint session states."""
    IDLE = 0
    PAINTING = 1


class PaintSession:
    """
    Tracks whether a stroke is in progress and the last recorded point.

    One session is created per drawing surface. The session does not keep
    any shape history; shapes are built, rendered and dropped.

    Usage:
        session = PaintSession(surface)
        session.start_session(Coordinate(10, 10))
        session.extend_session(Coordinate(20, 10))
        session.end_session()
    """

    def __init__(
        self,
        surface=None,
        style: Optional[StyleSpec] = None,
        shape_kind: Optional[Union[ShapeKind, str]] = None,
        render_func: Callable = render,
    ):
        self._surface = surface
        self._style = style if style is not None else Config.get_default_style()
        self._shape_kind = ShapeKind.from_value(
            shape_kind if shape_kind is not None else Config.DEFAULT_SHAPE_KIND
        )
        self._render = render_func

        self._state = SessionState.IDLE
        self._last_point: Optional[Coordinate] = None

        # Called with (shape, style) after each rendered increment
        self.on_shape_rendered: Optional[Callable[[Shape, StyleSpec], None]] = None

    # ==================== Properties ====================

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state == SessionState.PAINTING

    @property
    def last_point(self) -> Optional[Coordinate]:
        return self._last_point

    @property
    def style(self) -> StyleSpec:
        return self._style

    @property
    def shape_kind(self) -> ShapeKind:
        return self._shape_kind

    @property
    def surface(self):
        return self._surface

    @surface.setter
    def surface(self, value):
        self._surface = value

    # ==================== Configuration ====================

    def configure_style(self, spec: StyleSpec):
        """Set the style used for subsequent shapes."""
        if not isinstance(spec, StyleSpec):
            raise TypeError(f"Expected StyleSpec, got {type(spec).__name__}")
        self._style = spec
        logger.debug(f"Style configured: {spec}")

    def configure_shape_kind(self, kind: Union[ShapeKind, str]):
        """Set the shape kind used for subsequent increments."""
        self._shape_kind = ShapeKind.from_value(kind)
        logger.debug(f"Shape kind configured: {self._shape_kind.value}")

    # ==================== Session transitions ====================

    def start_session(self, point: Coordinate):
        """Begin a stroke at point (pointer down)."""
        if self._state == SessionState.PAINTING:
            logger.debug("start_session while painting; re-anchoring stroke")
        self._state = SessionState.PAINTING
        self._last_point = point

    def extend_session(self, point: Coordinate):
        """Paint one increment from the last point to point (pointer move)."""
        if self._state != SessionState.PAINTING:
            return
        if self._last_point is None:
            logger.debug("extend_session ignored: no last point recorded")
            return

        shape = create_shape(self._shape_kind, self._last_point, point)
        self._render(self._surface, shape, self._style)
        self._last_point = point

        if self.on_shape_rendered is not None:
            self.on_shape_rendered(shape, self._style)

    def end_session(self):
        """Finish the current stroke (pointer up or leave)."""
        if self._state != SessionState.PAINTING:
            return
        self._state = SessionState.IDLE
        self._last_point = None


__all__ = ['PaintSession', 'SessionState']
