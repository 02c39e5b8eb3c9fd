"""
Shape primitives built from two coordinates.

The shape set is closed: Segment, Circle and Square. Each shape is an
immutable value created for a single increment of a stroke and is never
kept after it has been rendered.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .coordinate import Coordinate


class ShapeKind(Enum):
    """Available shape kinds for a paint session."""
    SEGMENT = 'segment'
    CIRCLE = 'circle'
    SQUARE = 'square'

    @classmethod
    def from_value(cls, value: Union['ShapeKind', str]) -> 'ShapeKind':
        """Parse a ShapeKind from an enum member or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ', '.join(kind.value for kind in cls)
            raise ValueError(f"Unknown shape kind {value!r} (expected one of: {valid})") from None


@dataclass(frozen=True)
class Segment:
    """Straight line from a to b."""
    a: Coordinate
    b: Coordinate

    kind = ShapeKind.SEGMENT


@dataclass(frozen=True)
class Circle:
    """Circle centered at a, passing through b."""
    a: Coordinate
    b: Coordinate

    kind = ShapeKind.CIRCLE

    @property
    def center(self) -> Coordinate:
        return self.a

    @property
    def radius(self) -> float:
        return self.a.distance_to(self.b)


@dataclass(frozen=True)
class Square:
    """
    Axis-aligned square anchored at a.

    The side length is the distance from a to b, so the box does not
    pass through b unless the drag is purely horizontal or vertical.
    """
    a: Coordinate
    b: Coordinate

    kind = ShapeKind.SQUARE

    @property
    def side(self) -> float:
        return self.a.distance_to(self.b)

    @property
    def top_left(self) -> Coordinate:
        return self.a


Shape = Union[Segment, Circle, Square]

_SHAPE_CLASSES = {
    ShapeKind.SEGMENT: Segment,
    ShapeKind.CIRCLE: Circle,
    ShapeKind.SQUARE: Square,
}


def create_shape(kind: Union[ShapeKind, str], a: Coordinate, b: Coordinate) -> Shape:
    """
    Create the shape of the given kind spanning a -> b.

    Args:
        kind: ShapeKind or its name
        a: First point (segment start, circle center, square anchor)
        b: Second point

    Returns:
        New Segment, Circle or Square

    Raises:
        ValueError: If kind is not a known shape kind
    """
    shape_kind = ShapeKind.from_value(kind)
    return _SHAPE_CLASSES[shape_kind](a, b)


__all__ = ['ShapeKind', 'Segment', 'Circle', 'Square', 'Shape', 'create_shape']
