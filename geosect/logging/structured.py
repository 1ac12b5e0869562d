"""
Structured JSON Logger
======================

One JSON object per log line, under the ``geosect.<component>`` logger.

geosect logs little: a DEBUG line when a SpatialContext is built, a
WARNING when a context factory rejects a shape, and INFO/ERROR lines
around config loading. Relate algorithms never log.

Output:
    {"timestamp": "2025-10-24T15:30:45.123456+00:00", "level": "WARNING",
     "component": "context", "event": "shape.rejected",
     "message": "Rejected point: Bad X value 200.0 ...",
     "metadata": {"x": 200, "y": 0}}
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    JSON logger on top of the standard logging module.

    Attributes:
        component: Component name ("context", "config")
        logger: Underlying Python logger
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        self.component = component
        self.logger_name = logger_name or f"geosect.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        log_level = getattr(logging, level)
        if not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(
            log_level,
            json.dumps(log_entry, default=str),
            exc_info=exc_info if level == 'ERROR' else None
        )

    def debug(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        self._log('DEBUG', event, message, metadata)

    def info(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        self._log('INFO', event, message, metadata)

    def warning(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        """Log a WARNING; used for shapes rejected by a context factory."""
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log an ERROR with the exception type and message attached.

        Args:
            event: Typed log event (e.g. LogEvent.CONFIG_ERROR)
            message: Human-readable message
            metadata: Additional context (e.g. the config path)
            exc_info: Exception that caused the failure
        """
        self._log('ERROR', event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """Passes through the JSON line built by StructuredLogger."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(component: str, level: int = logging.INFO) -> StructuredLogger:
    """
    Create a StructuredLogger for a geosect component.

    Example:
        >>> logger = create_logger("context", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
