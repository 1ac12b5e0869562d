"""
Geodesic Distance Calculators
=============================

Great-circle metrics on a sphere. Points are (lon, lat) in degrees and
distances are degrees of arc (central angle); convert with
``geosect.distance.utils.degrees_to_dist``.

Design:
- One abstract class owns box, bearing and area math
- Subclasses only supply the central-angle formula
- Formulas use numpy ufuncs so scalars and arrays share one code path
"""

import math
from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

import numpy as np

from geosect.distance import utils
from geosect.distance.base import DistanceCalculator
from geosect.shapes.circle import Circle
from geosect.shapes.point import Point
from geosect.shapes.rectangle import Rectangle

if TYPE_CHECKING:
    from geosect.context import SpatialContext


class GeodesicSphereDistCalc(DistanceCalculator):
    """
    Base for spherical calculators.

    Subclasses implement ``_central_angle_rad`` for lat/lon in radians.
    """

    @abstractmethod
    def _central_angle_rad(self, lat1, lon1, lat2, lon2):
        """Central angle in radians; arguments may be floats or arrays."""

    def distance_xy(self, a: Point, x: float, y: float) -> float:
        angle = self._central_angle_rad(
            math.radians(a.y), math.radians(a.x), math.radians(y), math.radians(x)
        )
        return float(np.degrees(angle))

    def distances(self, from_pt: Point, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        angle = self._central_angle_rad(
            math.radians(from_pt.y),
            math.radians(from_pt.x),
            np.radians(np.asarray(ys, dtype=float)),
            np.radians(np.asarray(xs, dtype=float)),
        )
        return np.degrees(angle)

    def calc_box_by_dist_from_pt(
        self,
        center: Point,
        distance: float,
        ctx: Optional["SpatialContext"]
    ) -> Rectangle:
        return utils.calc_box_by_dist_from_pt_deg(center.y, center.x, distance)

    def point_on_bearing(
        self,
        from_pt: Point,
        distance: float,
        bearing_deg: float,
        ctx: Optional["SpatialContext"]
    ) -> Point:
        if distance == 0:
            return from_pt

        start_lat = math.radians(from_pt.y)
        start_lon = math.radians(from_pt.x)
        dist_rad = math.radians(distance)
        bearing_rad = math.radians(bearing_deg)

        cos_ang_dist = math.cos(dist_rad)
        sin_ang_dist = math.sin(dist_rad)
        cos_start_lat = math.cos(start_lat)
        sin_start_lat = math.sin(start_lat)

        sin_lat2 = sin_start_lat * cos_ang_dist + cos_start_lat * sin_ang_dist * math.cos(bearing_rad)
        lat2 = math.asin(max(-1.0, min(1.0, sin_lat2)))
        lon2 = start_lon + math.atan2(
            math.sin(bearing_rad) * sin_ang_dist * cos_start_lat,
            cos_ang_dist - sin_start_lat * sin_lat2,
        )

        return Point(
            utils.norm_lon_deg(math.degrees(lon2)),
            utils.norm_lat_deg(math.degrees(lat2)),
        )

    def area_circle(self, circle: Circle) -> float:
        """Spherical cap area in square degrees."""
        cap = 2 * math.pi * (1 - math.cos(math.radians(circle.radius)))
        return cap * utils.RAD_TO_DEG * utils.RAD_TO_DEG

    def area_rectangle(self, rect: Rectangle) -> float:
        """Lat/lon band area in square degrees."""
        lat1 = math.radians(rect.min_y)
        lat2 = math.radians(rect.max_y)
        band = math.radians(rect.width) * abs(math.sin(lat2) - math.sin(lat1))
        return band * utils.RAD_TO_DEG * utils.RAD_TO_DEG


class HaversineDistCalc(GeodesicSphereDistCalc):
    """Haversine formula; well-conditioned for small distances."""

    def _central_angle_rad(self, lat1, lon1, lat2, lon2):
        hsin_x = np.sin((lon1 - lon2) * 0.5)
        hsin_y = np.sin((lat1 - lat2) * 0.5)
        h = hsin_y * hsin_y + np.cos(lat1) * np.cos(lat2) * hsin_x * hsin_x
        h = np.minimum(h, 1.0)
        return 2 * np.arctan2(np.sqrt(h), np.sqrt(1 - h))


class LawOfCosinesDistCalc(GeodesicSphereDistCalc):
    """Spherical law of cosines; fast, imprecise for tiny distances."""

    def _central_angle_rad(self, lat1, lon1, lat2, lon2):
        delta_lon = lon2 - lon1
        cos_b = np.sin(lat1) * np.sin(lat2) + np.cos(lat1) * np.cos(lat2) * np.cos(delta_lon)
        angle = np.arccos(np.clip(cos_b, -1.0, 1.0))
        # identical points can land a rounding error away from 1.0
        return np.where((lat1 == lat2) & (lon1 == lon2), 0.0, angle)


class VincentyDistCalc(GeodesicSphereDistCalc):
    """Vincenty's special case for the sphere; accurate at all distances."""

    def _central_angle_rad(self, lat1, lon1, lat2, lon2):
        cos_lat1 = np.cos(lat1)
        cos_lat2 = np.cos(lat2)
        sin_lat1 = np.sin(lat1)
        sin_lat2 = np.sin(lat2)
        delta_lon = lon2 - lon1
        cos_d_lon = np.cos(delta_lon)
        sin_d_lon = np.sin(delta_lon)

        a = cos_lat2 * sin_d_lon
        b = cos_lat1 * sin_lat2 - sin_lat1 * cos_lat2 * cos_d_lon
        c = sin_lat1 * sin_lat2 + cos_lat1 * cos_lat2 * cos_d_lon
        return np.arctan2(np.sqrt(a * a + b * b), c)
