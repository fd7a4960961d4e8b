"""Logging configuration for DocQL.

Everything goes to a single stdout stream handler. ``LOG_FORMAT=json`` switches
to one JSON object per line for log shippers.
"""

import json
import logging
from logging.config import dictConfig

from docql.config import Settings, get_settings


class JsonFormatter(logging.Formatter):
    """Structured JSON formatter."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["error"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def build_logging_config(settings: Settings) -> dict:
    """Build the dictConfig mapping for the given settings."""
    level = settings.log_level.upper()
    formatter_name = "json" if settings.log_format.lower() == "json" else "plain"

    return {
        "version": 1,
        "disable_existing_loggers": False,  # keep uvicorn loggers
        "formatters": {
            "plain": {
                "format": "%(asctime)s %(levelname)-5s %(name)s: %(message)s",
                "datefmt": "%Y-%m-%dT%H:%M:%S",
            },
            "json": {
                "()": JsonFormatter,
                "datefmt": "%Y-%m-%dT%H:%M:%S",
            },
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": formatter_name,
                "stream": "ext://sys.stdout",
            }
        },
        "root": {
            "handlers": ["stdout"],
            "level": level,
        },
    }


def setup_logging(settings: Settings | None = None) -> None:
    """Configure root logging from settings."""
    if settings is None:
        settings = get_settings()
    dictConfig(build_logging_config(settings))
    if not settings.sql_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
