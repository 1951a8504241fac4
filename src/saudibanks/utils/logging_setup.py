from __future__ import annotations

import json
import logging
import os
import threading
import traceback
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Dict

from saudibanks.utils.config import Settings, load_settings

LOGGER_NAME = "saudibanks"

_TRUE_VALUES = {"1", "true", "TRUE", "yes", "YES"}

_CONFIGURED: set[str] = set()
_CONFIG_LOCK = threading.Lock()


class JsonLineFormatter(logging.Formatter):
    """Serializes a log record to one JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "funcName": record.funcName,
            "line": record.lineno,
            "process": record.process,
            "threadName": record.threadName,
            "event_name": getattr(record, "event_name", None),
        }

        extra_obj = getattr(record, "extra_payload", None)
        if extra_obj:
            payload["extra"] = extra_obj

        if record.exc_info:
            payload["exception"] = "".join(traceback.format_exception(*record.exc_info))

        return json.dumps(payload, ensure_ascii=False, default=str)


def _resolve_level(settings: Settings) -> int:
    name = (os.environ.get("SAUDIBANKS_LOG_LEVEL") or settings.log_level or "WARNING").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(
    log_dir: Path | None = None,
    name: str = LOGGER_NAME,
    *,
    settings: Settings | None = None,
) -> logging.Logger:
    """
    Configures the package logger once. Nothing is installed on import; a library
    caller that never calls this only sees records through its own root handlers.

    Console output is OFF unless enabled in config or via SAUDIBANKS_LOG_CONSOLE=1.
    With a log_dir, text records go to <log_dir>/saudibanks.log; <log_dir>/saudibanks.jsonl
    is written as well when settings.log_json is true.
    Handlers are installed once per logger name.
    """
    settings = settings or load_settings()
    log_dir = log_dir or settings.log_dir
    logger = logging.getLogger(name)
    level = _resolve_level(settings)

    with _CONFIG_LOCK:
        if name not in _CONFIGURED:
            fmt = logging.Formatter(
                "%(asctime)s.%(msecs)03d %(levelname)s "
                "[%(name)s:%(funcName)s:%(lineno)d] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )

            console = settings.log_console or os.environ.get("SAUDIBANKS_LOG_CONSOLE", "").strip() in _TRUE_VALUES
            if console:
                ch = logging.StreamHandler()
                ch.setFormatter(fmt)
                logger.addHandler(ch)

            if log_dir is not None:
                log_dir.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_dir / "saudibanks.log", encoding="utf-8")
                fh.setFormatter(fmt)
                logger.addHandler(fh)
                if settings.log_json:
                    fh_json = logging.FileHandler(log_dir / "saudibanks.jsonl", encoding="utf-8")
                    fh_json.setFormatter(JsonLineFormatter())
                    logger.addHandler(fh_json)

            _CONFIGURED.add(name)

    logger.setLevel(level)
    log_event(
        logger,
        "logging.start",
        "Logging initialized",
        level=logging.getLevelName(level),
        log_dir=str(log_dir) if log_dir else None,
        json=settings.log_json,
    )
    return logger


def log_event(logger: logging.Logger, event_name: str, message: str, **extra: Any) -> None:
    """
    Structured logging helper:
    - attaches event_name and extra_payload to the record
    - appends a readable key=value suffix to the text message
    """
    extra_payload: Dict[str, Any] = extra or {}
    suffix = ""
    if extra_payload:
        suffix = " | " + " ".join(f"{k}={extra_payload[k]!r}" for k in sorted(extra_payload.keys()))
    logger.info(
        f"{message}{suffix}",
        extra={
            "event_name": event_name,
            "extra_payload": extra_payload,
        },
    )
