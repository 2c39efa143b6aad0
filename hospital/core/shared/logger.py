"""
Shared Logger

Logging setup for the hospital records application.

Structured context travels in ``record.extra_data``; identifiers that point
to a person (national ID, email, phone) are masked before any handler
writes them.
"""

import json
import logging
import sys
from collections.abc import Callable
from datetime import datetime
from typing import Any

CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
CONSOLE_DATEFMT = "%Y-%m-%d %H:%M:%S"

# "key" and "value" carry the raw offending input in exception details
SENSITIVE_FIELDS = frozenset({"national_id", "email", "phone", "key", "value"})


def mask_value(value: Any) -> str:
    """Keep the last two characters of an identifier."""
    text = str(value)
    if len(text) <= 2:
        return "*" * len(text)
    return "*" * (len(text) - 2) + text[-2:]


def mask_context(data: dict[str, Any]) -> dict[str, Any]:
    """Copy of ``data`` with sensitive keys masked, nested dicts included."""
    masked: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            masked[key] = mask_context(value)
        elif key in SENSITIVE_FIELDS and value is not None:
            masked[key] = mask_value(value)
        else:
            masked[key] = value
    return masked


class PatientDataFilter(logging.Filter):
    """Mask personal identifiers found in the structured context."""

    def filter(self, record: logging.LogRecord) -> bool:
        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            record.extra_data = mask_context(extra_data)
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now().isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            log_data["extra"] = extra_data

        return json.dumps(log_data, default=str)


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Handlers share the record; restore the plain name afterwards
        original = record.levelname
        record.levelname = f"{self.COLORS.get(original, self.RESET)}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


_FORMATTERS: dict[str, Callable[[], logging.Formatter]] = {
    "json": JSONFormatter,
    "colored": lambda: ColoredFormatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT),
    "plain": lambda: logging.Formatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT),
}


class ContextLogger:
    """
    Logger that attaches a fixed context to every record.

    Example:
        ```python
        log = get_use_case_logger("schedule_appointment").with_context(doctor_id=7)
        log.warning("Slot already taken", scheduled_at="2030-01-15T10:00:00")
        ```
    """

    def __init__(self, name: str, context: dict[str, Any] | None = None):
        self._logger = logging.getLogger(name)
        self._context = context or {}

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def context(self) -> dict[str, Any]:
        return dict(self._context)

    def with_context(self, **kwargs) -> "ContextLogger":
        """Create new logger with additional context."""
        return ContextLogger(self._logger.name, {**self._context, **kwargs})

    def _log(self, level: int, message: str, exc_info: bool = False, **kwargs) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, message, exc_info=exc_info, extra={"extra_data": {**self._context, **kwargs}})

    def debug(self, message: str, **kwargs) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        """Log at ERROR level with the current traceback."""
        self._log(logging.ERROR, message, exc_info=True, **kwargs)


def _make_handler(handler: logging.Handler, level: int, format_type: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(_FORMATTERS[format_type]())
    handler.addFilter(PatientDataFilter())
    return handler


def configure_logging(
    level: str = "INFO",
    format_type: str = "colored",
    log_file: str | None = None,
) -> None:
    """
    Configure application logging.

    Replaces any handler already installed on the root logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: 'colored', 'json', or 'plain'
        log_file: Optional file that receives the same records as JSON
    """
    if format_type not in _FORMATTERS:
        raise ValueError(f"Unknown log format: {format_type}")

    numeric_level = getattr(logging, level.upper())
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    root_logger.addHandler(_make_handler(logging.StreamHandler(sys.stdout), numeric_level, format_type))
    if log_file:
        root_logger.addHandler(_make_handler(logging.FileHandler(log_file), numeric_level, "json"))


def get_logger(name: str, context: dict[str, Any] | None = None) -> ContextLogger:
    return ContextLogger(name, context)


def get_use_case_logger(use_case_name: str) -> ContextLogger:
    """Logger for application use cases, named ``use_case.<name>``."""
    return get_logger(f"use_case.{use_case_name}", {"component": "use_case", "use_case": use_case_name})
