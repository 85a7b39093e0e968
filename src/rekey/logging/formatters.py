"""JSON log formatters."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Attributes present on every LogRecord; anything else was passed via `extra`.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line.

    Custom attributes attached to the record (through ``extra=`` or by
    assignment) are copied into the output, so structured data reaches the
    log pipeline unchanged.
    """

    def __init__(self, indent: int | None = None):
        super().__init__()
        self.indent = indent

    def build(self, record: logging.LogRecord) -> dict[str, Any]:
        data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                data[key] = value

        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)

        return data

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(self.build(record), indent=self.indent, default=str)


class CompactJSONFormatter(JSONFormatter):
    """JSON formatter without whitespace, for high-volume log shipping."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(self.build(record), separators=(",", ":"), default=str)
