"""
Error types for geosect.

Malformed geometry is rejected at construction time; relate algorithms
themselves never raise for valid shapes.
"""


class InvalidShapeError(ValueError):
    """Raised when shape parameters violate a construction invariant"""
    pass


class ContextMismatchError(AssertionError):
    """Raised (debug mode only) when a shape is related under a foreign context"""
    pass
