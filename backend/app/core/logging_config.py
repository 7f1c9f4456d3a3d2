"""
Logging configuration.

- console: human-readable lines (development)
- json: one JSON object per line on stdout (log aggregation)
"""

import json
import logging
import logging.config
from datetime import datetime, timezone


def get_logging_config(level: str = "INFO", fmt: str = "console") -> dict:
    """
    Build a dictConfig for the application.

    Args:
        level: Root log level name
        fmt: "console" or "json"

    Returns:
        logging.config dict
    """
    if fmt == "json":
        formatters = {"default": {"()": "app.core.logging_config.JsonFormatter"}}
    else:
        formatters = {
            "default": {
                "format": "[{asctime}] {levelname} {name} {message}",
                "style": "{",
            },
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "": {"handlers": ["console"], "level": level},
            "app": {"handlers": ["console"], "level": level, "propagate": False},
            "uvicorn.access": {"handlers": ["console"], "level": level, "propagate": False},
            "sqlalchemy.engine": {"handlers": ["console"], "level": "WARNING", "propagate": False},
        },
    }


def configure_logging(level: str = "INFO", fmt: str = "console") -> None:
    logging.config.dictConfig(get_logging_config(level.upper(), fmt))


class JsonFormatter(logging.Formatter):
    """JSON lines with timestamp, level, logger, message and any extras."""

    _standard_attrs = {
        "name", "msg", "args", "levelname", "levelno", "pathname",
        "filename", "module", "lineno", "funcName", "created",
        "msecs", "relativeCreated", "thread", "threadName",
        "processName", "process", "exc_info", "exc_text", "stack_info",
        "message", "taskName",
    }

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in self._standard_attrs
        }
        if extras:
            log_entry["extra"] = extras

        return json.dumps(log_entry, default=str)
