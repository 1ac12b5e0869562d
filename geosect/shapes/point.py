"""
Point Shape Module
==================

Zero-dimensional shape. A point is either inside another shape or not,
so it never reports INTERSECTS against an area.
"""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from geosect.errors import InvalidShapeError
from geosect.relation import SpatialRelation
from geosect.shapes.base import Shape, double_bits_hash, to_int32

if TYPE_CHECKING:
    from geosect.context import SpatialContext


@dataclass(frozen=True)
class Point(Shape):
    """
    Immutable 2D point.

    In a geodetic context ``x`` is longitude and ``y`` latitude, in degrees.

    Attributes:
        x: X coordinate
        y: Y coordinate

    Invariants:
        - x and y are finite
    """

    x: float
    y: float

    def __post_init__(self):
        """Coerce to float and validate."""
        x, y = float(self.x), float(self.y)
        if not (math.isfinite(x) and math.isfinite(y)):
            raise InvalidShapeError(f"Point coordinates must be finite, got ({x}, {y})")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def relate(self, other: Shape, ctx: "SpatialContext") -> SpatialRelation:
        if isinstance(other, Point):
            return SpatialRelation.INTERSECTS if self == other else SpatialRelation.DISJOINT
        return other.relate(self, ctx).transpose()

    @property
    def bounding_box(self):
        from geosect.shapes.rectangle import Rectangle

        return Rectangle(self.x, self.x, self.y, self.y)

    def has_area(self) -> bool:
        return False

    def get_area(self, ctx: Optional["SpatialContext"] = None) -> float:
        return 0.0

    def __hash__(self) -> int:
        return to_int32(31 * double_bits_hash(self.x) + double_bits_hash(self.y))

    def __str__(self) -> str:
        return f"Pt(x={self.x},y={self.y})"
