"""
Shape Base Module
=================

Capability set shared by every shape, plus the bit-level hashing helpers
that keep shape hash codes reproducible across implementations.

Design:
- Abstract base (ABC) so concrete shapes can stay frozen dataclasses
- Every shape answers relate / bounding_box / has_area / get_area
- Hash helpers fold IEEE-754 bits into signed 32-bit ints
"""

import struct
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from geosect.relation import SpatialRelation

if TYPE_CHECKING:
    from geosect.context import SpatialContext
    from geosect.shapes.rectangle import Rectangle


_INT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


def to_int32(value: int) -> int:
    """Wrap an arbitrary Python int to a signed 32-bit value."""
    value &= _INT32_MASK
    if value >= 1 << 31:
        value -= 1 << 32
    return value


def double_bits_hash(value: float) -> int:
    """
    Hash term for a double: ``bits ^ (bits >>> 32)`` truncated to 32 bits.

    Both 0.0 and -0.0 map to 0 so that equal values hash identically.

    Args:
        value: Double to fold

    Returns:
        Signed 32-bit hash term
    """
    if value == 0.0:
        return 0
    bits = struct.unpack(">q", struct.pack(">d", value))[0] & _UINT64_MASK
    return to_int32(bits ^ (bits >> 32))


class Shape(ABC):
    """
    Base class for geometric shapes.

    All shapes are immutable values. Relations are read as
    "self <relation> other".
    """

    @abstractmethod
    def relate(self, other: "Shape", ctx: "SpatialContext") -> SpatialRelation:
        """Classify how this shape relates to ``other``."""

    @property
    @abstractmethod
    def bounding_box(self) -> "Rectangle":
        """Smallest axis-aligned rectangle enclosing the shape."""

    @abstractmethod
    def has_area(self) -> bool:
        """False for zero-dimensional or degenerate shapes."""

    @abstractmethod
    def get_area(self, ctx: Optional["SpatialContext"] = None) -> float:
        """
        Area of the shape.

        Args:
            ctx: Context whose distance calculator measures the surface.
                 None falls back to planar formulas.
        """
