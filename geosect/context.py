"""
Spatial Context Module
======================

Binds a distance calculator and world bounds that every shape built
through the context shares.

Design:
- Read-only after construction (safe to share across threads)
- Factory methods validate before a shape is published
- Shapes built under one context must not be related under another
"""

import math
import sys
from typing import Optional

from geosect.distance import CartesianDistCalc, DistanceCalculator, HaversineDistCalc
from geosect.errors import InvalidShapeError
from geosect.logging import LogEvent, StructuredLogger, create_logger
from geosect.shapes import Circle, Point, Rectangle

GEO_WORLD_BOUNDS = Rectangle(-180, 180, -90, 90)
CARTESIAN_WORLD_BOUNDS = Rectangle(
    -sys.float_info.max, sys.float_info.max, -sys.float_info.max, sys.float_info.max
)


class SpatialContext:
    """
    Shared configuration for a family of shapes.

    Attributes:
        geo: True for a spherical (lon/lat degrees) surface
        distance_calculator: Metric used by every relate/area/box computation
        world_bounds: Rectangle every coordinate must fall into

    Usage:
        ctx = SpatialContext(geo=False)
        circle = ctx.make_circle(ctx.make_point(0, 0), 5)
        rect = ctx.make_rectangle(-1, 1, -1, 1)
        circle.relate(rect, ctx)  # SpatialRelation.CONTAINS
    """

    def __init__(
        self,
        geo: bool,
        distance_calculator: Optional[DistanceCalculator] = None,
        world_bounds: Optional[Rectangle] = None,
        logger: Optional[StructuredLogger] = None
    ):
        """
        Args:
            geo: Geodetic (True) or cartesian (False) surface
            distance_calculator: Defaults to haversine (geo) or Euclidean
            world_bounds: Defaults to the whole globe (geo) or the full
                          float range (cartesian). Geo contexts cannot
                          override it.
            logger: Structured logger (default: component "context")

        Raises:
            ValueError: If a geo context is given custom world bounds
        """
        if geo and world_bounds is not None and world_bounds != GEO_WORLD_BOUNDS:
            raise ValueError(f"Geo contexts use fixed world bounds, got {world_bounds}")

        self._geo = geo
        if distance_calculator is None:
            distance_calculator = HaversineDistCalc() if geo else CartesianDistCalc()
        self._distance_calculator = distance_calculator
        if world_bounds is None:
            world_bounds = GEO_WORLD_BOUNDS if geo else CARTESIAN_WORLD_BOUNDS
        self._world_bounds = world_bounds
        self._logger = logger or create_logger("context")

        self._logger.debug(
            event=LogEvent.CONTEXT_CREATED,
            message="Spatial context created",
            metadata={
                'geo': geo,
                'distance_calculator': type(distance_calculator).__name__,
                'world_bounds': str(world_bounds),
            }
        )

    @property
    def geo(self) -> bool:
        return self._geo

    @property
    def distance_calculator(self) -> DistanceCalculator:
        return self._distance_calculator

    @property
    def world_bounds(self) -> Rectangle:
        return self._world_bounds

    def verify_x(self, x: float) -> float:
        """
        Check that an X (longitude) value lies within world bounds.

        Raises:
            InvalidShapeError: If x is non-finite or out of bounds
        """
        bounds = self._world_bounds
        if not math.isfinite(x) or not bounds.min_x <= x <= bounds.max_x:
            raise InvalidShapeError(f"Bad X value {x} is not in boundary {bounds}")
        return x

    def verify_y(self, y: float) -> float:
        """
        Check that a Y (latitude) value lies within world bounds.

        Raises:
            InvalidShapeError: If y is non-finite or out of bounds
        """
        bounds = self._world_bounds
        if not math.isfinite(y) or not bounds.min_y <= y <= bounds.max_y:
            raise InvalidShapeError(f"Bad Y value {y} is not in boundary {bounds}")
        return y

    def make_point(self, x: float, y: float) -> Point:
        try:
            return Point(self.verify_x(float(x)), self.verify_y(float(y)))
        except InvalidShapeError as e:
            self._reject("point", e, {'x': x, 'y': y})
            raise

    def make_rectangle(self, min_x: float, max_x: float, min_y: float, max_y: float) -> Rectangle:
        try:
            return Rectangle(
                self.verify_x(float(min_x)),
                self.verify_x(float(max_x)),
                self.verify_y(float(min_y)),
                self.verify_y(float(max_y)),
            )
        except InvalidShapeError as e:
            self._reject(
                "rectangle", e,
                {'min_x': min_x, 'max_x': max_x, 'min_y': min_y, 'max_y': max_y}
            )
            raise

    def make_circle(self, center: Point, radius: float) -> Circle:
        """
        Build a circle under this context.

        Args:
            center: Center point (verified against world bounds)
            radius: Radius in this context's distance units

        Raises:
            InvalidShapeError: On out-of-bounds center or bad radius
        """
        try:
            self.verify_x(center.x)
            self.verify_y(center.y)
            return Circle(center, radius, self)
        except InvalidShapeError as e:
            self._reject("circle", e, {'center': str(center), 'radius': radius})
            raise

    def make_circle_xy(self, x: float, y: float, radius: float) -> Circle:
        return self.make_circle(self.make_point(x, y), radius)

    def _reject(self, shape_kind: str, error: InvalidShapeError, metadata: dict) -> None:
        self._logger.warning(
            event=LogEvent.SHAPE_REJECTED,
            message=f"Rejected {shape_kind}: {error}",
            metadata=metadata
        )

    def __repr__(self) -> str:
        return (
            f"SpatialContext(geo={self._geo}, "
            f"calculator={self._distance_calculator!r})"
        )


GEO = SpatialContext(geo=True)
CARTESIAN = SpatialContext(geo=False)
