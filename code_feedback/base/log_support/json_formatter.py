"""JSON logging formatter used by the code_feedback logging setup.

Serializes the standard record fields and hoists structured event payloads
(emitted by :func:`code_feedback.base.logging.log_event`) to the top level so
a log line reads as a single flat JSON object.
"""
from __future__ import annotations

import contextlib
import json
import logging
from datetime import datetime, timezone

ISO = "%Y-%m-%dT%H:%M:%S.%fZ"

# LogRecord attributes that are never copied into the payload.
_RESERVED = frozenset(
    {
        "msg",
        "args",
        "levelname",
        "levelno",
        "name",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }
)


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON line.

    ``record.getMessage()`` is kept under ``msg`` unless it is itself a JSON
    object, in which case its keys are merged in and ``msg`` is dropped.
    Extra attributes passed via ``extra=`` are merged last without overwriting.
    """

    def format(self, record: logging.LogRecord) -> str:  # pragma: no cover - trivial formatting
        payload = {
            "ts": datetime.now(timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
        }
        text = record.getMessage()
        hoisted = False
        with contextlib.suppress(ValueError):
            parsed = json.loads(text)
            if isinstance(parsed, dict):
                payload.update(parsed)
                hoisted = True
        if not hoisted:
            payload["msg"] = text
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in _RESERVED or key in payload:
                continue
            payload[key] = value
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


__all__ = ["JsonFormatter", "ISO"]
