"""
Rectangle Shape Module
======================

Axis-aligned box. Also used as the enclosing box of every other shape,
which makes Rectangle.relate the cheap pre-filter for exact tests.

Design:
- Immutable (frozen dataclass)
- Relations computed per axis, then merged
- Degenerate boxes (lines, points) are valid
"""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from geosect.errors import InvalidShapeError
from geosect.relation import SpatialRelation
from geosect.shapes.base import Shape
from geosect.shapes.point import Point

if TYPE_CHECKING:
    from geosect.context import SpatialContext


def _relate_range(int_min: float, int_max: float, ext_min: float, ext_max: float) -> SpatialRelation:
    """Relate the interval [int_min, int_max] to [ext_min, ext_max]."""
    if ext_min > int_max or ext_max < int_min:
        return SpatialRelation.DISJOINT
    if ext_min >= int_min and ext_max <= int_max:
        return SpatialRelation.CONTAINS
    if ext_min <= int_min and ext_max >= int_max:
        return SpatialRelation.WITHIN
    return SpatialRelation.INTERSECTS


@dataclass(frozen=True)
class Rectangle(Shape):
    """
    Immutable axis-aligned rectangle.

    Attributes:
        min_x: Left edge
        max_x: Right edge
        min_y: Bottom edge
        max_y: Top edge

    Invariants:
        - all bounds finite
        - min_x <= max_x
        - min_y <= max_y

    Note:
        Boxes crossing the antimeridian (min_x > max_x) are not representable.
    """

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def __post_init__(self):
        """Coerce bounds to float and validate ordering."""
        bounds = tuple(float(v) for v in (self.min_x, self.max_x, self.min_y, self.max_y))
        if not all(math.isfinite(v) for v in bounds):
            raise InvalidShapeError(f"Rectangle bounds must be finite, got {bounds}")
        min_x, max_x, min_y, max_y = bounds
        if min_x > max_x:
            raise InvalidShapeError(f"min_x must be <= max_x, got {min_x} > {max_x}")
        if min_y > max_y:
            raise InvalidShapeError(f"min_y must be <= max_y, got {min_y} > {max_y}")
        for name, value in zip(("min_x", "max_x", "min_y", "max_y"), bounds):
            object.__setattr__(self, name, value)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        """Center point of the box."""
        return Point((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    @property
    def bounding_box(self) -> "Rectangle":
        return self

    def has_area(self) -> bool:
        return self.width > 0 and self.height > 0

    def get_area(self, ctx: Optional["SpatialContext"] = None) -> float:
        if ctx is None:
            return self.width * self.height
        return ctx.distance_calculator.area(self)

    def contains_xy(self, x: float, y: float) -> bool:
        """Check if (x, y) lies in the closed box."""
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def relate(self, other: Shape, ctx: "SpatialContext") -> SpatialRelation:
        if isinstance(other, Point):
            return self.relate_point(other)
        if isinstance(other, Rectangle):
            return self.relate_rectangle(other)
        return other.relate(self, ctx).transpose()

    def relate_point(self, point: Point) -> SpatialRelation:
        if self.contains_xy(point.x, point.y):
            return SpatialRelation.CONTAINS
        return SpatialRelation.DISJOINT

    def relate_rectangle(self, rect: "Rectangle") -> SpatialRelation:
        """
        Relate two boxes axis by axis.

        When one axis matches exactly, the other axis decides; otherwise
        differing per-axis answers collapse to INTERSECTS.
        """
        y_sect = self.relate_y_range(rect.min_y, rect.max_y)
        if y_sect is SpatialRelation.DISJOINT:
            return y_sect

        x_sect = self.relate_x_range(rect.min_x, rect.max_x)
        if x_sect is SpatialRelation.DISJOINT:
            return x_sect

        if x_sect is y_sect:
            return x_sect

        if self.min_x == rect.min_x and self.max_x == rect.max_x:
            return y_sect
        if self.min_y == rect.min_y and self.max_y == rect.max_y:
            return x_sect

        return SpatialRelation.INTERSECTS

    def relate_x_range(self, ext_min_x: float, ext_max_x: float) -> SpatialRelation:
        return _relate_range(self.min_x, self.max_x, ext_min_x, ext_max_x)

    def relate_y_range(self, ext_min_y: float, ext_max_y: float) -> SpatialRelation:
        return _relate_range(self.min_y, self.max_y, ext_min_y, ext_max_y)

    def __str__(self) -> str:
        return f"Rect(minX={self.min_x},maxX={self.max_x},minY={self.min_y},maxY={self.max_y})"
