"""
Structured logging for the Chara engine and its API.

JSON output for production, a plain line format for development.
"""

import json
import logging
import sys

from typing import Any, Dict, Optional

_RESERVED = {
    "name", "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "lineno", "funcName", "created", "msecs", "relativeCreated",
    "thread", "threadName", "processName", "process", "exc_info", "exc_text",
    "stack_info", "taskName",
}


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging output"""

    def format(self, record: logging.LogRecord) -> str:
        base = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            base["exception"] = self.formatException(record.exc_info)

        # Fields passed through logger.info("msg", extra={...})
        for key, value in record.__dict__.items():
            if key not in _RESERVED and key not in base:
                base[key] = value

        return json.dumps(base, default=str)


def setup_logging(level: str = "INFO", format_json: bool = True) -> None:
    """
    Configure the root logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Whether to use JSON formatting
    """
    root = logging.getLogger()
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    if format_json:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ))

    root.addHandler(handler)

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        root.setLevel(logging.INFO)
        root.warning("Unknown log level %r, using INFO", level)
        return
    root.setLevel(numeric_level)


def get_logger(name: str, extra_fields: Optional[Dict[str, Any]] = None):
    """Logger for `name`, optionally stamping `extra_fields` on every record."""
    logger = logging.getLogger(name)
    if extra_fields:
        return logging.LoggerAdapter(logger, extra_fields)
    return logger
