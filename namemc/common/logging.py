from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import IO, Any, Dict, FrozenSet, List

__all__ = ["JsonFormatter", "configure_json_logging"]

LOG_ROOT_ENV = "NAMEMC_LOG_ROOT"
_ROTATED_FILES_KEPT = 7

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RECORD_ATTRIBUTES: FrozenSet[str] = frozenset(
    vars(logging.makeLogRecord({})).keys()
) | {"message", "asctime", "taskName"}


class JsonFormatter(logging.Formatter):
    """One JSON object per line, tagged with the emitting service."""

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        document: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "service": self.service_name,
            "level": record.levelname.lower(),
            "message": record.getMessage(),
            "logger": record.name,
        }
        if record.exc_info:
            document["exception"] = self.formatException(record.exc_info)
        extra = {
            name: value
            for name, value in vars(record).items()
            if name not in _RECORD_ATTRIBUTES
        }
        if extra:
            document["extra"] = extra
        return json.dumps(document, ensure_ascii=False, default=str)


def _resolve_level(level: int | str) -> int:
    requested = os.getenv("LOG_LEVEL") or level
    if isinstance(requested, int):
        return requested
    resolved = logging.getLevelName(requested.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _build_handlers(
    service_name: str, stream: IO[str] | None, log_dir: str | Path | None
) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(stream)]
    directory = log_dir if log_dir is not None else os.getenv(LOG_ROOT_ENV)
    if directory:
        target = Path(directory)
        target.mkdir(parents=True, exist_ok=True)
        handlers.append(
            TimedRotatingFileHandler(
                target / f"{service_name}.log",
                when="midnight",
                backupCount=_ROTATED_FILES_KEPT,
                encoding="utf-8",
            )
        )
    return handlers


def configure_json_logging(
    service_name: str,
    *,
    level: int | str = logging.INFO,
    stream: IO[str] | None = None,
    log_dir: str | Path | None = None,
) -> None:
    """Replace the root logger's handlers with JSON-emitting ones.

    ``LOG_LEVEL`` wins over ``level``. Logs also go to a daily rotated
    ``<service_name>.log`` when ``log_dir`` or ``NAMEMC_LOG_ROOT`` is set.
    """

    root = logging.getLogger()
    root.setLevel(_resolve_level(level))
    for existing in list(root.handlers):
        root.removeHandler(existing)
        existing.close()

    formatter = JsonFormatter(service_name)
    for handler in _build_handlers(service_name, stream, log_dir):
        handler.setFormatter(formatter)
        root.addHandler(handler)
