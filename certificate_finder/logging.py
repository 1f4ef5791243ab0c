"""Logging setup for the certificate-search CLI."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

LogFormat = Literal["text", "json"]
LogDestination = Literal["auto", "stdout", "stderr"]

TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# httpx logs the full request URL at INFO, and that URL carries the API key.
_NOISY_LOGGERS = ("httpx", "httpcore")

_RESERVED_RECORD_KEYS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object, including `extra` fields."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: dict[str, Any] = {
            "timestamp": datetime.now(tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = self.formatStack(record.stack_info)
        payload.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _RESERVED_RECORD_KEYS and not key.startswith("_")
        )
        return json.dumps(payload, default=str, ensure_ascii=False)


@dataclass(slots=True)
class _LevelRangeFilter(logging.Filter):
    min_level: int | None = None
    max_level: int | None = None

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        if self.min_level is not None and record.levelno < self.min_level:
            return False
        return self.max_level is None or record.levelno <= self.max_level


def configure_logging(
    *,
    level: str | int = "INFO",
    fmt: LogFormat = "text",
    destination: LogDestination = "auto",
) -> logging.Logger:
    """Configure the root logger and quiet HTTP transport loggers below DEBUG."""

    resolved_level = _resolve_level(level)
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(resolved_level)

    formatter: logging.Formatter = (
        JsonFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT)
    )
    for handler in _build_handlers(destination):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    transport_level = logging.DEBUG if resolved_level <= logging.DEBUG else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)

    logging.captureWarnings(True)
    return root


def _resolve_level(value: str | int) -> int:
    if isinstance(value, int):
        return value
    resolved = logging.getLevelName(value.upper())
    if not isinstance(resolved, int):  # getLevelName echoes unknown names back as strings
        raise ValueError(f"Unknown log level: {value}")
    return resolved


def _build_handlers(destination: LogDestination) -> Iterable[logging.Handler]:
    if destination == "stdout":
        return (logging.StreamHandler(sys.stdout),)
    if destination == "stderr":
        return (logging.StreamHandler(sys.stderr),)

    below_warning = logging.StreamHandler(sys.stdout)
    below_warning.addFilter(_LevelRangeFilter(max_level=logging.INFO))
    warning_and_up = logging.StreamHandler(sys.stderr)
    warning_and_up.addFilter(_LevelRangeFilter(min_level=logging.WARNING))
    return (below_warning, warning_and_up)


__all__ = ["JsonFormatter", "LogDestination", "LogFormat", "configure_logging"]
