"""
Cartesian Distance Calculator
=============================

Euclidean metric on a flat plane.
"""

import math
from typing import TYPE_CHECKING, Optional

import numpy as np

from geosect.distance.base import DistanceCalculator
from geosect.shapes.circle import Circle
from geosect.shapes.point import Point
from geosect.shapes.rectangle import Rectangle

if TYPE_CHECKING:
    from geosect.context import SpatialContext


class CartesianDistCalc(DistanceCalculator):
    """
    Plain Euclidean distance.

    Boxes are the plain square around the center; the context is not
    consulted.
    """

    def distance_xy(self, a: Point, x: float, y: float) -> float:
        delta_x = a.x - x
        delta_y = a.y - y
        return math.sqrt(delta_x * delta_x + delta_y * delta_y)

    def distances(self, from_pt: Point, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        delta_x = from_pt.x - np.asarray(xs, dtype=float)
        delta_y = from_pt.y - np.asarray(ys, dtype=float)
        return np.sqrt(delta_x * delta_x + delta_y * delta_y)

    def calc_box_by_dist_from_pt(
        self,
        center: Point,
        distance: float,
        ctx: Optional["SpatialContext"]
    ) -> Rectangle:
        # Must enclose the whole circle, even past the world edge
        return Rectangle(
            center.x - distance,
            center.x + distance,
            center.y - distance,
            center.y + distance,
        )

    def point_on_bearing(
        self,
        from_pt: Point,
        distance: float,
        bearing_deg: float,
        ctx: Optional["SpatialContext"]
    ) -> Point:
        if distance == 0:
            return from_pt
        bearing_rad = math.radians(bearing_deg)
        x = from_pt.x + math.sin(bearing_rad) * distance
        y = from_pt.y + math.cos(bearing_rad) * distance
        return Point(x, y)

    def area_circle(self, circle: Circle) -> float:
        return math.pi * circle.radius * circle.radius

    def area_rectangle(self, rect: Rectangle) -> float:
        return rect.width * rect.height
