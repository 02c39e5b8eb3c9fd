"""
Coordinate value type for the painting engine.

Coordinates are always expressed in surface-local space: the device
position with the surface's origin offset already subtracted.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """Immutable 2D point in surface-local space."""
    x: float
    y: float

    def distance_to(self, other: 'Coordinate') -> float:
        """Euclidean distance to another coordinate."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)


def to_local(device_point: Coordinate, surface_origin_offset: Coordinate) -> Coordinate:
    """
    Convert a device-space point to surface-local space.

    Args:
        device_point: Pointer position in device space
        surface_origin_offset: Position of the surface within device space

    Returns:
        Coordinate relative to the surface's top-left corner
    """
    return Coordinate(
        device_point.x - surface_origin_offset.x,
        device_point.y - surface_origin_offset.y
    )


__all__ = ['Coordinate', 'to_local']
