"""
Logging configuration for json_response applications.

- Colored console output in development (env="dev")
- One JSON object per line everywhere else
- A single root StreamHandler, so repeated setup never duplicates lines

The response helpers themselves never log; only the application layer
(start-up, exception handlers) does.
"""

import json
import logging
import sys
import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional


class ColoredFormatter(logging.Formatter):
    """Formatter with ANSI colors for log levels and logger names."""

    COLORS = {
        "DEBUG": "\033[36m",      # Cyan
        "INFO": "\033[32m",       # Green
        "WARNING": "\033[33m",    # Yellow
        "ERROR": "\033[31m",      # Red
        "CRITICAL": "\033[1;31m", # Bold Red
    }
    GREY = "\033[90m"
    RESET = "\033[0m"

    def formatTime(self, record, datefmt=None):
        """Include milliseconds in the timestamp."""
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s},{int(record.msecs):03d}"

    def format(self, record: logging.LogRecord) -> str:
        original_levelname = record.levelname
        original_name = record.name

        log_color = self.COLORS.get(record.levelname, "")
        if log_color:
            record.levelname = f"{log_color}{record.levelname}{self.RESET}"
        record.name = f"{self.GREY}{record.name}{self.RESET}"

        try:
            return super().format(record)
        finally:
            # Other handlers must see the plain values
            record.levelname = original_levelname
            record.name = original_name


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging outside development."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        return json.dumps(log_data, default=str)


def setup_logging(env: str = "prod", level: Optional[str] = "INFO") -> None:
    """
    Configure the root logger.

    Existing root handlers are removed and replaced by one stderr
    StreamHandler, colored in "dev" and JSON otherwise. Unknown level
    names fall back to INFO.
    """
    if env == "dev":
        formatter: logging.Formatter = ColoredFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = JSONFormatter()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    resolved = logging.getLevelName((level or "INFO").upper())
    root_logger.setLevel(resolved if isinstance(resolved, int) else logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with the specified name.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Application started")
    """
    return logging.getLogger(name)
