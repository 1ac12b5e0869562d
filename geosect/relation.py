"""
Spatial Relation Module
=======================

Four-valued classification of how two shapes relate.

Design:
- Plain Enum (pure value, no identity)
- transpose() flips "B relative to A" into "A relative to B"
- Relations are always read as "this <relation> other"
"""

from enum import Enum


class SpatialRelation(Enum):
    """
    Topological relation of a shape ("this") to another shape ("other").

    Values:
        DISJOINT: no point in common
        INTERSECTS: some overlap, neither contains the other
        WITHIN: this lies entirely inside other
        CONTAINS: other lies entirely inside this
    """

    DISJOINT = "DISJOINT"
    INTERSECTS = "INTERSECTS"
    WITHIN = "WITHIN"
    CONTAINS = "CONTAINS"

    def transpose(self) -> "SpatialRelation":
        """
        Relation with the roles of the two shapes swapped.

        WITHIN and CONTAINS swap; DISJOINT and INTERSECTS are symmetric.
        Applying it twice returns the original relation.
        """
        if self is SpatialRelation.WITHIN:
            return SpatialRelation.CONTAINS
        if self is SpatialRelation.CONTAINS:
            return SpatialRelation.WITHIN
        return self

    def combine(self, other: "SpatialRelation") -> "SpatialRelation":
        """
        Merge the relations of two parts of the same shape.

        Equal relations combine to themselves, anything else to INTERSECTS.
        """
        if self is other:
            return self
        return SpatialRelation.INTERSECTS

    def intersects(self) -> bool:
        """True for every relation except DISJOINT."""
        return self is not SpatialRelation.DISJOINT

    def within(self) -> bool:
        return self is SpatialRelation.WITHIN

    def contains(self) -> bool:
        return self is SpatialRelation.CONTAINS
