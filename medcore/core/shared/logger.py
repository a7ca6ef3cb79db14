"""
Shared Logger

Structured logging for the domain layer, built on the standard library.

Domain code logs through a ``DomainLogger``: a named logger plus bound
fields that travel with every message as ``record.fields``. Values that can
mask themselves (person and organization identifiers) are logged masked.
"""

import json
import logging
import sys
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from medcore.config.settings import Settings

TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
TEXT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _loggable(value: Any) -> Any:
    masked = getattr(value, "masked", None)
    return masked() if callable(masked) else value


class JSONFormatter(logging.Formatter):
    """One JSON object per line. Bound fields go under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }
        fields = getattr(record, "fields", None)
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class ColoredFormatter(logging.Formatter):
    """Text formatter that wraps the level name in an ANSI color."""

    LEVEL_COLORS = {
        logging.DEBUG: 36,
        logging.INFO: 32,
        logging.WARNING: 33,
        logging.ERROR: 31,
        logging.CRITICAL: 35,
    }

    def formatMessage(self, record: logging.LogRecord) -> str:
        code = self.LEVEL_COLORS.get(record.levelno)
        if code is None:
            return super().formatMessage(record)
        plain = record.levelname
        record.levelname = f"\033[{code}m{plain}\033[0m"
        try:
            return super().formatMessage(record)
        finally:
            record.levelname = plain


class DomainLogger:
    """
    Named logger with bound fields.

    ``bind`` returns a new logger and leaves the original's fields alone.

    Example:
        ```python
        logger = get_domain_logger("billing").bind(charge_id=str(charge.id))
        logger.debug("Charge status changed", to_status="SUCCEEDED")
        ```
    """

    def __init__(self, name: str, fields: Mapping[str, Any] | None = None):
        self._logger = logging.getLogger(name)
        self._fields = dict(fields or {})

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def fields(self) -> dict[str, Any]:
        return dict(self._fields)

    def bind(self, **fields: Any) -> "DomainLogger":
        return DomainLogger(self.name, {**self._fields, **fields})

    def debug(self, message: str, **fields: Any) -> None:
        self._emit(logging.DEBUG, message, fields)

    def info(self, message: str, **fields: Any) -> None:
        self._emit(logging.INFO, message, fields)

    def _emit(self, level: int, message: str, fields: dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        merged = {key: _loggable(value) for key, value in {**self._fields, **fields}.items()}
        # stacklevel 3 attributes the record to the caller of debug/info
        self._logger.log(level, message, extra={"fields": merged}, stacklevel=3)


def _console_formatter(format_type: str) -> logging.Formatter:
    if format_type == "json":
        return JSONFormatter()
    if format_type == "colored":
        return ColoredFormatter(TEXT_FORMAT, datefmt=TEXT_DATE_FORMAT)
    return logging.Formatter(TEXT_FORMAT, datefmt=TEXT_DATE_FORMAT)


def configure_logging(
    level: str = "INFO",
    format_type: str = "colored",
    log_file: str | None = None,
) -> None:
    """
    Send root logging to stdout, plus an optional JSON file.

    Handlers already on the root logger are replaced.

    Args:
        level: Level name, any case
        format_type: 'colored', 'json' or 'plain' for the console
        log_file: Path for a second handler that always writes JSON
    """
    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(_console_formatter(format_type))
    handlers: list[logging.Handler] = [console]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(JSONFormatter())
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers[:] = handlers
    root.setLevel(level.upper())


def configure_logging_from_settings(settings: "Settings") -> None:
    configure_logging(
        level=settings.LOG_LEVEL,
        format_type=settings.LOG_FORMAT,
        log_file=settings.LOG_FILE,
    )


def get_logger(name: str, fields: Mapping[str, Any] | None = None) -> DomainLogger:
    return DomainLogger(name, fields)


def get_domain_logger(context_name: str) -> DomainLogger:
    """Logger named ``domain.<context>`` tagged with its bounded context."""
    return get_logger(f"domain.{context_name}", {"component": "domain", "context": context_name})
