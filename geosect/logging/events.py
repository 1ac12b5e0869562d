"""
Structured Log Event Types
==========================

Typed event names for the few things geosect logs: context creation,
config loading and rejected shapes. Names read ``<area>.<action>``.
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - context.*: SpatialContext lifecycle
    - config.*: Configuration loading
    - shape.*: Shape construction through a context
    - error.*: Error conditions
    """

    # ========== Context Events ==========
    CONTEXT_CREATED = "context.created"
    """SpatialContext constructed with its distance calculator."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Context configuration loaded and validated."""

    # ========== Shape Events ==========
    SHAPE_REJECTED = "shape.rejected"
    """Shape parameters failed validation in a context factory method."""

    # ========== Error Events ==========
    CONFIG_ERROR = "error.config"
    """Configuration file missing or invalid."""
