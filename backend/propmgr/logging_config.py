# backend/propmgr/logging_config.py
from __future__ import annotations

import json
import logging
import logging.config
import os
from datetime import datetime, timezone
from typing import Any, Optional

from .middleware.request_context import current_request_id

# attributes every LogRecord has; anything else arrived through extra=
_RESERVED = set(vars(logging.LogRecord("x", logging.INFO, "x", 0, "", None, None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per line; `extra=` fields are copied through as top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        doc: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        rid = current_request_id()
        if rid:
            doc["request_id"] = rid

        for key, value in record.__dict__.items():
            if key not in _RESERVED and not key.startswith("_"):
                doc[key] = value

        if record.exc_info:
            doc["exc"] = self.formatException(record.exc_info)
        return json.dumps(doc, ensure_ascii=False, default=str)


def _env_level(name: str, default: str) -> str:
    return (os.getenv(name) or default).upper()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Route everything (uvicorn, celery, sqlalchemy, httpx, propmgr.*) through a
    single stdout handler with the JSON formatter. Safe to call again on reload.
    """
    root_level = (level or _env_level("LOG_LEVEL", "INFO")).upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"json": {"()": JsonFormatter}},
            "handlers": {
                "stdout": {"class": "logging.StreamHandler", "stream": "ext://sys.stdout", "formatter": "json"},
            },
            "root": {"level": root_level, "handlers": ["stdout"]},
            "loggers": {
                # the access line from RequestContextMiddleware replaces uvicorn's
                "uvicorn.access": {"level": "WARNING"},
                "sqlalchemy.engine": {"level": _env_level("SQL_LOG_LEVEL", "WARNING")},
                "httpx": {"level": _env_level("HTTPX_LOG_LEVEL", "WARNING")},
            },
        }
    )
