"""
Structured logging utilities for record-factory.

The library only ever obtains loggers; it never configures handlers on import.
Applications (and tests) call `configure_logging` once to get a human-readable
console formatter or, for pipelines, one JSON object per line.

Usage:
    from record_factory.utils.logging import configure_logging, get_logger

    configure_logging(level="DEBUG", json_logs=False)
    log = get_logger(__name__)
    log.debug("Record type defined", extra={"record_type": "Point"})
"""

from __future__ import annotations

import json
import logging
import logging.config
from typing import Any, Dict, Optional

from record_factory.config import get_settings

# Attributes every LogRecord carries; anything else arrived through `extra=`.
_STANDARD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime", "taskName"}


def _json_formatter(record: logging.LogRecord) -> str:
    """Render a log record as JSON string."""
    payload: Dict[str, Any] = {
        "level": record.levelname,
        "logger": record.name,
        "message": record.getMessage(),
    }
    for key, value in vars(record).items():
        if key in _STANDARD_ATTRS or key == "extra":
            continue
        payload[key] = value
    if isinstance(getattr(record, "extra", None), dict):
        payload.update(record.extra)
    if record.exc_info:
        payload["exc_info"] = logging.Formatter().formatException(record.exc_info)
    if record.stack_info:
        payload["stack_info"] = record.stack_info
    return json.dumps(payload, default=repr)


class JsonFormatter(logging.Formatter):
    """Minimal JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        return _json_formatter(record)


def configure_logging(
    level: Optional[str] = None,
    json_logs: Optional[bool] = None,
) -> None:
    """
    Configure root logging.

    Parameters
    ----------
    level : str, optional
        Logging level name (e.g., "DEBUG", "INFO", "WARNING"). Defaults to
        the `RECORD_FACTORY_LOG_LEVEL` setting.
    json_logs : bool, optional
        Whether to emit logs as JSON. Defaults to the `RECORD_FACTORY_JSON_LOGS`
        setting.
    """
    settings = get_settings()
    effective_level = (level or settings.log_level).upper()
    use_json = settings.json_logs if json_logs is None else json_logs

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
                "json": {
                    "()": JsonFormatter,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "json" if use_json else "console",
                    "level": effective_level,
                }
            },
            "root": {
                "handlers": ["default"],
                "level": effective_level,
            },
        }
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with the given name. If name is None, returns the root logger.
    """
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "JsonFormatter"]
