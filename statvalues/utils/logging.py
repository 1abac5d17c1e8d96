from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Optional, TextIO


# Attributes every LogRecord carries; anything else arrived through ``extra``
_STANDARD_ATTRS = frozenset(vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))) | {
    "message",
    "asctime",
}


def record_extras(record: logging.LogRecord) -> Dict[str, Any]:
    return {k: v for k, v in vars(record).items() if k not in _STANDARD_ATTRS}


class JsonFormatter(logging.Formatter):
    """One JSON object per record: level, logger, message, time and ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
        }
        payload.update(record_extras(record))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        # numpy scalars and paths are not JSON native
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """Route the root logger through a single JSON handler.

    Logs go to stderr unless ``stream`` is given, so CLI results on stdout
    stay clean.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(JsonFormatter())
    root.handlers.clear()
    root.addHandler(handler)
