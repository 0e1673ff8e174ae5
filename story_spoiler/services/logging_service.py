"""
Structured Logging Configuration for the Story Spoiler suite

Provides:
- JSON-formatted structured logging
- Per-call HTTP logging with status-based levels
- Root logger setup for the CLI runner
"""
import sys
import json
import logging
from datetime import datetime, timezone
from typing import Optional


# Anything on a record beyond these came in through `extra=`
_RESERVED_ATTRS = set(vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))) | {"message"}


class StructuredJSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.
    Outputs one JSON object per line.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        log_data["location"] = {
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName
        }

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info)
            }

        extra_fields = {}
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                try:
                    json.dumps(value)  # Check if serializable
                    extra_fields[key] = value
                except (TypeError, ValueError):
                    extra_fields[key] = str(value)

        if extra_fields:
            log_data["extra"] = extra_fields

        return json.dumps(log_data)


def log_api_call(
    method: str,
    path: str,
    status_code: int,
    duration_ms: float,
    logger: logging.Logger = None
):
    """Log the outcome of one HTTP call against the Story Spoiler API."""
    api_logger = logger or logging.getLogger("story_spoiler.api")

    if status_code >= 500:
        level = logging.ERROR
    elif status_code >= 400:
        level = logging.WARNING
    else:
        level = logging.INFO

    api_logger.log(
        level,
        f"{method} {path} - {status_code}",
        extra={
            "event_type": "api_call",
            "method": method,
            "path": path,
            "status_code": status_code,
            "duration_ms": round(duration_ms, 2),
        }
    )


def setup_logging(
    level: str = "INFO",
    json_format: bool = False,
    log_file: Optional[str] = None
):
    """
    Configure logging for the CLI runner.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: Use JSON formatting for structured logging
        log_file: Optional file path to write logs
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)

    if json_format:
        console_handler.setFormatter(StructuredJSONFormatter())
    else:
        console_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ))

    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(StructuredJSONFormatter())
        root_logger.addHandler(file_handler)

    # Silence noisy loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    return root_logger
