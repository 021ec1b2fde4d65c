"""Centralized log formatting and handler setup for the ``fars`` logger."""

import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict

# Attributes every LogRecord carries; anything else came from ``extra=``.
_RESERVED = {
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName",
}

_TEXT_FORMAT = "%(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Merges any `extra=` kwargs (year, data_file, state...) directly
    into the payload.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED:
                payload[key] = value

        # numpy scalars and paths fall back to str()
        return json.dumps(payload, default=str)


def configure_logging(verbose: bool = False, json_format: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the ``fars`` package logger.

    Calling it again replaces the previous handler rather than stacking
    a second one.

    Args:
        verbose: Log DEBUG and above when True, INFO and above otherwise.
        json_format: Use ``JsonFormatter`` instead of plain text.

    Returns:
        The configured ``fars`` logger.
    """
    logger = logging.getLogger("fars")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        JsonFormatter() if json_format else logging.Formatter(_TEXT_FORMAT)
    )
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
