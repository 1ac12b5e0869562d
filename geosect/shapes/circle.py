"""
Circle Shape Module
===================

Point-radius shape whose metric comes from the context's distance
calculator, so the same code serves cartesian and geodetic surfaces.

Design:
- Immutable (frozen dataclass)
- Enclosing box computed once at construction and cached
- Rectangle relate is two-phase: box pre-filter, then closest-point test
- Equality/hash live in module-level helpers shared by any circle type

Known limitation:
    Relating a circle to a rectangle is NOT correct when the coordinate
    system wraps (antimeridian crossing or full world wrap).
"""

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import numpy as np

from geosect.errors import ContextMismatchError, InvalidShapeError
from geosect.relation import SpatialRelation
from geosect.shapes.base import Shape, double_bits_hash, to_int32
from geosect.shapes.point import Point
from geosect.shapes.rectangle import Rectangle

if TYPE_CHECKING:
    from geosect.context import SpatialContext


def circle_equals(this: "Circle", other: object) -> bool:
    """
    Canonical circle equality: same center and bit-equal radius.

    Args:
        this: Circle on the left-hand side (required)
        other: Any object

    Raises:
        TypeError: If ``this`` is None
    """
    if this is None:
        raise TypeError("circle_equals: argument 'this' must not be None")
    if this is other:
        return True
    if not isinstance(other, Circle):
        return False
    return this.center == other.center and this.radius == other.radius


def circle_hash(this: "Circle") -> int:
    """
    Canonical circle hash: ``31 * hash(center) + radius_term`` as int32.

    Raises:
        TypeError: If ``this`` is None
    """
    if this is None:
        raise TypeError("circle_hash: argument 'this' must not be None")
    # raw value; the hash() builtin remaps -1 to -2
    result = this.center.__hash__()
    return to_int32(31 * result + double_bits_hash(this.radius))


@dataclass(frozen=True, eq=False)
class Circle(Shape):
    """
    Immutable circle (point-radius).

    Attributes:
        center: Center point
        radius: Distance from center to edge, in the units of the context's
                distance calculator (degrees for geodetic contexts)
        ctx: Context the circle was built under (shared, read-only)

    Invariants:
        - radius >= 0 and finite
        - radius == 0 => has_area() is False
    """

    center: Point
    radius: float
    ctx: "SpatialContext" = field(repr=False)

    def __post_init__(self):
        """Validate radius and cache the enclosing box."""
        radius = float(self.radius)
        if not math.isfinite(radius) or radius < 0:
            raise InvalidShapeError(f"radius must be finite and >= 0, got {radius}")
        object.__setattr__(self, "radius", radius)

        enclosing_box = self.ctx.distance_calculator.calc_box_by_dist_from_pt(
            self.center, radius, self.ctx
        )
        object.__setattr__(self, "_enclosing_box", enclosing_box)

    @property
    def bounding_box(self) -> Rectangle:
        return self._enclosing_box

    def has_area(self) -> bool:
        return self.radius > 0

    def get_area(self, ctx: Optional["SpatialContext"] = None) -> float:
        if ctx is None:
            return math.pi * self.radius * self.radius
        return ctx.distance_calculator.area(self)

    def contains(self, x: float, y: float) -> bool:
        """Point membership, boundary inclusive."""
        return self.ctx.distance_calculator.distance_xy(self.center, x, y) <= self.radius

    def contains_points(self, points: np.ndarray) -> np.ndarray:
        """
        Vectorized membership test.

        Args:
            points: Nx2 array of (x, y) coordinates

        Returns:
            Boolean mask of shape (N,) where True = inside circle
        """
        points = np.asarray(points, dtype=float)
        if points.size == 0:
            return np.array([], dtype=bool)
        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(f"points must be Nx2 array, got shape {points.shape}")

        distances = self.ctx.distance_calculator.distances(
            self.center, points[:, 0], points[:, 1]
        )
        return distances <= self.radius

    def relate(self, other: Shape, ctx: "SpatialContext") -> SpatialRelation:
        if __debug__:
            if ctx is not self.ctx:
                raise ContextMismatchError(
                    f"{self} was built under {self.ctx!r}, related under {ctx!r}"
                )

        if isinstance(other, Point):
            return self.relate_point(other)
        if isinstance(other, Rectangle):
            return self.relate_rectangle(other, ctx)
        if isinstance(other, Circle):
            return self.relate_circle(other, ctx)
        return other.relate(self, ctx).transpose()

    def relate_point(self, point: Point) -> SpatialRelation:
        if self.contains(point.x, point.y):
            return SpatialRelation.CONTAINS
        return SpatialRelation.DISJOINT

    def relate_rectangle(self, rect: Rectangle, ctx: "SpatialContext") -> SpatialRelation:
        bbox_sect = self._enclosing_box.relate(rect, ctx)
        if bbox_sect is SpatialRelation.DISJOINT or bbox_sect is SpatialRelation.WITHIN:
            return bbox_sect
        # Box equals rect exactly: the curved circle sits strictly inside it
        if bbox_sect is SpatialRelation.CONTAINS and self._enclosing_box == rect:
            return SpatialRelation.WITHIN

        return self._relate_rectangle_phase2(rect, bbox_sect)

    def _relate_rectangle_phase2(self, rect: Rectangle, bbox_sect: SpatialRelation) -> SpatialRelation:
        """
        Closest-point test once the box pre-filter is inconclusive.

        Only DISJOINT, INTERSECTS or CONTAINS are possible here; the circle
        cannot be WITHIN since its box was not within rect.

        Does not handle dateline crossing or world wrap.
        """
        box = self._enclosing_box
        ctr_x = self.center.x
        ctr_y = self.center.y

        closest_x = min(max(ctr_x, rect.min_x), rect.max_x)
        closest_y = min(max(ctr_y, rect.min_y), rect.max_y)

        if closest_x == ctr_x:
            delta_y = abs(ctr_y - closest_y)
            dist_y_circ = box.max_y - ctr_y if ctr_y < closest_y else ctr_y - box.min_y
            if delta_y > dist_y_circ:
                return SpatialRelation.DISJOINT
        elif closest_y == ctr_y:
            delta_x = abs(ctr_x - closest_x)
            dist_x_circ = box.max_x - ctr_x if ctr_x < closest_x else ctr_x - box.min_x
            if delta_x > dist_x_circ:
                return SpatialRelation.DISJOINT
        elif not self.contains(closest_x, closest_y):
            return SpatialRelation.DISJOINT

        # If the circle contains rect, its box must contain rect too
        if bbox_sect is not SpatialRelation.CONTAINS:
            return SpatialRelation.INTERSECTS

        farthest_x = rect.max_x if rect.max_x - ctr_x > ctr_x - rect.min_x else rect.min_x
        farthest_y = rect.max_y if rect.max_y - ctr_y > ctr_y - rect.min_y else rect.min_y
        if self.contains(farthest_x, farthest_y):
            return SpatialRelation.CONTAINS
        return SpatialRelation.INTERSECTS

    def relate_circle(self, circle: "Circle", ctx: "SpatialContext") -> SpatialRelation:
        cross_dist = ctx.distance_calculator.distance(self.center, circle.center)
        a_dist = self.radius
        b_dist = circle.radius
        if cross_dist > a_dist + b_dist:
            return SpatialRelation.DISJOINT
        if cross_dist < a_dist and cross_dist + b_dist <= a_dist:
            return SpatialRelation.CONTAINS
        if cross_dist < b_dist and cross_dist + a_dist <= b_dist:
            return SpatialRelation.WITHIN
        return SpatialRelation.INTERSECTS

    def __eq__(self, other: object) -> bool:
        return circle_equals(self, other)

    def __hash__(self) -> int:
        return circle_hash(self)

    def __str__(self) -> str:
        return f"Circle({self.center},d={self.radius})"
