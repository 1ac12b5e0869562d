"""
Distance Calculator Base
========================

Bounded Context: Metric primitives.

Every relate algorithm is written against this contract only, so the same
shape code works on a flat plane and on a sphere.

Architecture:
    DistanceCalculator (abstract)
        ↓
    CartesianDistCalc, GeodesicSphereDistCalc (concrete)
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

import numpy as np

from geosect.shapes.circle import Circle
from geosect.shapes.point import Point
from geosect.shapes.rectangle import Rectangle

if TYPE_CHECKING:
    from geosect.context import SpatialContext


class DistanceCalculator(ABC):
    """
    Abstract metric used for all distance, bounding box and area math.

    Implementations trust their inputs: shapes are validated at construction,
    so no NaN or negative-distance guards are performed here.
    """

    def distance(self, a: Point, b: Point) -> float:
        """Distance between two points."""
        return self.distance_xy(a, b.x, b.y)

    @abstractmethod
    def distance_xy(self, a: Point, x: float, y: float) -> float:
        """Distance from ``a`` to the coordinate (x, y)."""

    @abstractmethod
    def distances(self, from_pt: Point, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        """Vectorized distance_xy over coordinate arrays."""

    @abstractmethod
    def calc_box_by_dist_from_pt(
        self,
        center: Point,
        distance: float,
        ctx: Optional["SpatialContext"]
    ) -> Rectangle:
        """
        Smallest axis-aligned rectangle enclosing every point within
        ``distance`` of ``center``.
        """

    @abstractmethod
    def point_on_bearing(
        self,
        from_pt: Point,
        distance: float,
        bearing_deg: float,
        ctx: Optional["SpatialContext"]
    ) -> Point:
        """
        Point reached by travelling ``distance`` from ``from_pt``.

        Bearing is in degrees clockwise from north (0 = +y).
        """

    @abstractmethod
    def area_circle(self, circle: Circle) -> float:
        pass

    @abstractmethod
    def area_rectangle(self, rect: Rectangle) -> float:
        pass

    def area(self, shape) -> float:
        """
        Area of a circle or rectangle on this surface.

        Raises:
            TypeError: For shape kinds this calculator cannot measure
        """
        if isinstance(shape, Circle):
            return self.area_circle(shape)
        if isinstance(shape, Rectangle):
            return self.area_rectangle(shape)
        raise TypeError(f"Cannot compute area of {type(shape).__name__}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
