"""Logging setup for cash machines.

Machine log records carry their context (machine id, error code, the
withdrawal or deposit involved) in ``record.extra``. Both formatters here
render that context: the JSON formatter as top-level keys, the text
formatter as ``key=value`` pairs after the message.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from cashpoint.config import LoggingConfig
from cashpoint.serialization import serialize_value

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Return the serialized ``extra`` payload of a record, or an empty dict."""
    extra = getattr(record, "extra", None)
    if not isinstance(extra, dict):
        return {}
    return {key: serialize_value(value) for key, value in extra.items()}


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with the record context merged in."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data.update(record_context(record))
        return json.dumps(log_data)


class ContextFormatter(logging.Formatter):
    """Plain text lines followed by the record context as ``key=value`` pairs.

    Deposits and withdrawals are shown by their total only.
    """

    def __init__(self) -> None:
        super().__init__(fmt=TEXT_FORMAT, datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        pairs = []
        for key, value in record_context(record).items():
            if isinstance(value, dict) and "total" in value:
                value = value["total"]
            pairs.append(f"{key}={value}")
        return f"{line} | {' '.join(pairs)}" if pairs else line


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
) -> None:
    """Send cashpoint logs to stdout.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); unknown names
        fall back to INFO.
    format_type : str
        ``"json"`` for :class:`JsonFormatter`, anything else for
        :class:`ContextFormatter`.
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    formatter = JsonFormatter() if format_type == "json" else ContextFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("cashpoint").setLevel(log_level)

    # Faker logs every provider lookup at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


def configure_logging(config: LoggingConfig) -> None:
    """Apply a :class:`LoggingConfig`."""
    setup_logging(level=config.level, format_type=config.format_type)
