"""
Renderer for shape primitives.

Paints a single shape with a given style through a surface's 2D drawing
context. Holds no state of its own.
"""

import logging
import math
from typing import TYPE_CHECKING, Optional

from .shapes import Shape, Segment, Circle, Square
from .style import StyleSpec

if TYPE_CHECKING:
    from ..surface.base import DrawingContext, DrawingSurface

logger = logging.getLogger(__name__)

FULL_TURN = 2 * math.pi


def apply_style(context: 'DrawingContext', style: StyleSpec):
    """Assign stroke attributes on the context (width, color, join)."""
    context.line_width = style.line_width
    context.stroke_style = style.stroke_color
    context.line_join = style.line_join.value


def _trace_segment(context: 'DrawingContext', shape: Segment):
    context.move_to(shape.a.x, shape.a.y)
    context.line_to(shape.b.x, shape.b.y)


def _trace_circle(context: 'DrawingContext', shape: Circle):
    center = shape.center
    context.arc(center.x, center.y, shape.radius, 0.0, FULL_TURN)


def _trace_square(context: 'DrawingContext', shape: Square):
    side = shape.side
    context.rect(shape.a.x, shape.a.y, side, side)


def render(surface: Optional['DrawingSurface'], shape: Shape, style: StyleSpec):
    """
    Stroke the outline of a shape onto a surface.

    Style attributes are applied before any path command is issued. If the
    surface is missing or has no usable drawing context the call does
    nothing.

    Args:
        surface: Object exposing get_context(), or None
        shape: Segment, Circle or Square
        style: Stroke style to paint with

    Raises:
        TypeError: If shape is not one of the known shape types
    """
    if isinstance(shape, Segment):
        trace = _trace_segment
    elif isinstance(shape, Circle):
        trace = _trace_circle
    elif isinstance(shape, Square):
        trace = _trace_square
    else:
        raise TypeError(f"Cannot render object of type {type(shape).__name__}")

    if surface is None:
        logger.debug("Render skipped: no surface attached")
        return

    context = surface.get_context()
    if context is None:
        logger.debug("Render skipped: surface has no drawing context")
        return

    with context:
        apply_style(context, style)
        context.begin_path()
        trace(context, shape)
        context.stroke()


__all__ = ['render', 'apply_style', 'FULL_TURN']
