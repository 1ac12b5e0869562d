"""
geosect v1.0
============

Bounded Context: Geometric relations for spatial search.

Classifies how two shapes relate (DISJOINT, INTERSECTS, WITHIN, CONTAINS)
on a flat (cartesian) or spherical (geodetic) surface.

Architecture:

    geosect/
    ├── relation.py        # SpatialRelation (+ transpose)
    ├── shapes/            # Immutable shapes
    │   ├── point.py       # Point
    │   ├── rectangle.py   # Rectangle
    │   └── circle.py      # Circle (two-phase rectangle relate)
    │
    ├── distance/          # Pluggable metrics
    │   ├── cartesian.py   # CartesianDistCalc
    │   └── geodesic.py    # Haversine, LawOfCosines, Vincenty
    │
    ├── context.py         # SpatialContext (metric + world bounds)
    ├── config.py          # YAML-backed context configuration
    └── logging/           # Structured JSON logging

Usage:

    from geosect import CARTESIAN, SpatialRelation

    ctx = CARTESIAN
    circle = ctx.make_circle_xy(0, 0, 10)
    rect = ctx.make_rectangle(-1, 1, -1, 1)

    circle.relate(rect, ctx)              # SpatialRelation.CONTAINS
    rect.relate(circle, ctx)              # SpatialRelation.WITHIN

    # Geodetic: degrees of arc
    from geosect import GEO
    paris = GEO.make_circle_xy(2.35, 48.86, 1.0)
    paris.relate(GEO.make_point(2.29, 48.85), GEO)   # CONTAINS

    # From YAML
    from geosect import SpatialContextConfig
    ctx = SpatialContextConfig.from_yaml("context.yaml").build_context()
"""

from geosect.relation import SpatialRelation
from geosect.errors import InvalidShapeError, ContextMismatchError
from geosect.shapes import Shape, Point, Rectangle, Circle, circle_equals, circle_hash
from geosect.distance import (
    DistanceCalculator,
    CartesianDistCalc,
    GeodesicSphereDistCalc,
    HaversineDistCalc,
    LawOfCosinesDistCalc,
    VincentyDistCalc,
)
from geosect.context import SpatialContext, GEO, CARTESIAN
from geosect.config import SpatialContextConfig, WorldBoundsConfig

__all__ = [
    # Relations
    "SpatialRelation",
    # Errors
    "InvalidShapeError",
    "ContextMismatchError",
    # Shapes
    "Shape",
    "Point",
    "Rectangle",
    "Circle",
    "circle_equals",
    "circle_hash",
    # Distance
    "DistanceCalculator",
    "CartesianDistCalc",
    "GeodesicSphereDistCalc",
    "HaversineDistCalc",
    "LawOfCosinesDistCalc",
    "VincentyDistCalc",
    # Context
    "SpatialContext",
    "GEO",
    "CARTESIAN",
    "SpatialContextConfig",
    "WorldBoundsConfig",
]

__version__ = "1.0.0"
