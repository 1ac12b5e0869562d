"""
Distance Layer
==============

Bounded Context: Pluggable metrics (cartesian or geodesic).

Responsibilities:
- Point-to-point distance (scalar and vectorized)
- Enclosing box of a point-radius circle
- Area of circles and rectangles on the target surface
- Travelling a distance along a bearing
"""

from geosect.distance.base import DistanceCalculator
from geosect.distance.cartesian import CartesianDistCalc
from geosect.distance.geodesic import (
    GeodesicSphereDistCalc,
    HaversineDistCalc,
    LawOfCosinesDistCalc,
    VincentyDistCalc,
)

__all__ = [
    "DistanceCalculator",
    "CartesianDistCalc",
    "GeodesicSphereDistCalc",
    "HaversineDistCalc",
    "LawOfCosinesDistCalc",
    "VincentyDistCalc",
]
