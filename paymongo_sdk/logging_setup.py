"""
JSON log output for the ``paymongo_sdk`` loggers

The transports attach ``endpoint``, ``method`` and ``status_code`` to their
records; :class:`JsonFormatter` lifts them into the JSON object.
"""

import json
import logging
import sys
from typing import IO, Any, Dict, Optional

EXTRA_FIELDS = ("endpoint", "method", "status_code")


class JsonFormatter(logging.Formatter):
    """One JSON object per record"""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": int(record.created * 1000),
            "logger": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        payload.update(
            {field: getattr(record, field) for field in EXTRA_FIELDS if hasattr(record, field)}
        )

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def setup_structured_logger(
    level: int = logging.INFO, stream: Optional[IO[str]] = None
) -> logging.Handler:
    """
    Route every ``paymongo_sdk`` logger to JSON lines

    Replaces handlers previously attached to ``paymongo_sdk`` and stops
    propagation to the root logger.

    Args:
        level: Logging level (default: logging.INFO)
        stream: Output stream (default: stdout)

    Returns:
        The installed handler

    Example:
        >>> from paymongo_sdk.logging_setup import setup_structured_logger
        >>> setup_structured_logger(logging.DEBUG)
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JsonFormatter())

    sdk_logger = logging.getLogger("paymongo_sdk")
    sdk_logger.setLevel(level)
    sdk_logger.handlers = [handler]
    sdk_logger.propagate = False
    return handler
