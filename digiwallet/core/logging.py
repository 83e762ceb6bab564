"""Structured logging setup.

JSON output is meant for production log shipping; ``text`` is easier to read
while developing locally. ``setup_logging`` is called once from the
application lifespan.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

# Extra attributes surfaced in JSON records when a log call passes them.
_EXTRA_FIELDS = (
    "wallet_id",
    "user_id",
    "card_id",
    "transaction_id",
    "reference_id",
    "error_kind",
    "path",
)


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            value = record.__dict__.get(key)
            if value is not None:
                payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install a single stream handler on the root logger."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, "_digiwallet", False):
            root.removeHandler(existing)
    handler._digiwallet = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


__all__ = ["JSONFormatter", "setup_logging"]
