"""
Shapes Layer
============

Bounded Context: Immutable geometric values and their relate algorithms.

Responsibilities:
- Shape representation (Point, Rectangle, Circle)
- Pairwise relate with transpose fallback for unknown kinds
- Value semantics (equality/hash) for use as dict/set keys

Design Philosophy:
- Immutable data structures
- Fail-fast validation at construction
- Metric primitives delegated to the context's DistanceCalculator
"""

from geosect.shapes.base import Shape
from geosect.shapes.point import Point
from geosect.shapes.rectangle import Rectangle
from geosect.shapes.circle import Circle, circle_equals, circle_hash

__all__ = [
    "Shape",
    "Point",
    "Rectangle",
    "Circle",
    "circle_equals",
    "circle_hash",
]
