"""
Render style attached to a shape at draw time.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union


class LineJoin(Enum):
    """How path segments are joined when stroked."""
    MITER = 'miter'
    ROUND = 'round'
    BEVEL = 'bevel'

    @classmethod
    def from_value(cls, value: Union['LineJoin', str]) -> 'LineJoin':
        """Parse a LineJoin from an enum member or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ', '.join(join.value for join in cls)
            raise ValueError(f"Unknown line join {value!r} (expected one of: {valid})") from None


@dataclass(frozen=True)
class StyleSpec:
    """
    Immutable stroke style.

    Attributes:
        stroke_color: Color name or hex string (e.g. 'yellow', '#FF5722')
        line_join: Join mode for path corners
        line_width: Stroke width in surface units, must be positive
    """
    stroke_color: str
    line_join: LineJoin
    line_width: float

    def __post_init__(self):
        if not isinstance(self.stroke_color, str) or not self.stroke_color.strip():
            raise ValueError("stroke_color must be a non-empty string")
        # Accept plain strings for convenience; stored as LineJoin
        object.__setattr__(self, 'line_join', LineJoin.from_value(self.line_join))
        if isinstance(self.line_width, bool) or not isinstance(self.line_width, (int, float)):
            raise ValueError(f"line_width must be a number, got {self.line_width!r}")
        if not math.isfinite(self.line_width) or self.line_width <= 0:
            raise ValueError(f"line_width must be positive and finite, got {self.line_width}")

    def to_dict(self) -> dict:
        return {
            'stroke_color': self.stroke_color,
            'line_join': self.line_join.value,
            'line_width': self.line_width,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'StyleSpec':
        return cls(
            stroke_color=data['stroke_color'],
            line_join=data['line_join'],
            line_width=data['line_width'],
        )


__all__ = ['LineJoin', 'StyleSpec']
