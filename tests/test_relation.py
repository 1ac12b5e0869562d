"""
SpatialRelation Tests

Tests the relation algebra: transpose, intersects and combine.
"""

import pytest

from geosect import SpatialRelation


class TestTranspose:
    """Tests for SpatialRelation.transpose()."""

    @pytest.mark.parametrize(
        "relation, expected",
        [
            (SpatialRelation.DISJOINT, SpatialRelation.DISJOINT),
            (SpatialRelation.INTERSECTS, SpatialRelation.INTERSECTS),
            (SpatialRelation.WITHIN, SpatialRelation.CONTAINS),
            (SpatialRelation.CONTAINS, SpatialRelation.WITHIN),
        ],
    )
    def test_transpose_table(self, relation, expected):
        assert relation.transpose() is expected

    @pytest.mark.parametrize("relation", list(SpatialRelation))
    def test_transpose_is_own_inverse(self, relation):
        assert relation.transpose().transpose() is relation


class TestPredicates:
    """Tests for derived predicates."""

    def test_only_disjoint_does_not_intersect(self):
        assert not SpatialRelation.DISJOINT.intersects()
        assert SpatialRelation.INTERSECTS.intersects()
        assert SpatialRelation.WITHIN.intersects()
        assert SpatialRelation.CONTAINS.intersects()

    def test_within_and_contains(self):
        assert SpatialRelation.WITHIN.within()
        assert not SpatialRelation.WITHIN.contains()
        assert SpatialRelation.CONTAINS.contains()
        assert not SpatialRelation.INTERSECTS.within()


class TestCombine:
    """Tests for merging relations of shape parts."""

    def test_equal_relations_combine_to_themselves(self):
        for relation in SpatialRelation:
            assert relation.combine(relation) is relation

    def test_mixed_relations_combine_to_intersects(self):
        assert SpatialRelation.WITHIN.combine(SpatialRelation.DISJOINT) is SpatialRelation.INTERSECTS
        assert SpatialRelation.CONTAINS.combine(SpatialRelation.WITHIN) is SpatialRelation.INTERSECTS
