"""
Structured Logging for geosect
==============================

Bounded Context: Observability

JSON-structured logging for context creation, configuration loading and
shape rejection. Relate algorithms do not log.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from geosect.logging import create_logger, LogEvent
    >>> logger = create_logger("context")
    >>> logger.warning(
    ...     event=LogEvent.SHAPE_REJECTED,
    ...     message="Bad X value",
    ...     metadata={'x': 200.0}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
