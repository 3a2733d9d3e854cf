"""로깅 설정 유틸리티(KR). Logging configuration utilities (EN)."""

from __future__ import annotations

import json
import logging
import logging.config
from pathlib import Path
from typing import Any, Dict

from src.scanner.streams import ERROR_STREAM, PROGRESS_STREAM

from .timezone import local_now

APP_LOGGERS = ("core", "src", "cli")


class JsonFormatter(logging.Formatter):
    """JSON 포맷터 구현 · Implement JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """레코드를 JSON 문자열로 직렬화 · Serialize record into JSON string."""

        payload: Dict[str, Any] = {
            "timestamp": local_now(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


class StampedFormatter(logging.Formatter):
    """타임스탬프 접두 한 줄 포맷 · One ``<timestamp>: <message>`` line per event."""

    def format(self, record: logging.LogRecord) -> str:
        return f"{local_now()}: {record.getMessage()}"


def _stream_handler(path: Path) -> Dict[str, Any]:
    path.parent.mkdir(parents=True, exist_ok=True)
    return {
        "class": "logging.FileHandler",
        "formatter": "stamped",
        "filename": str(path),
        "mode": "a",
        "encoding": "utf-8",
    }


def configure_logging(
    log_file: Path,
    level: str = "INFO",
    *,
    error_log: Path | None = None,
    progress_log: Path | None = None,
) -> None:
    """JSON 파일 로거와 오류/진행 스트림을 설정한다 · Configure app and stream loggers."""

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handlers: Dict[str, Any] = {
        "file": {
            "class": "logging.FileHandler",
            "formatter": "json",
            "filename": str(log_file),
            "encoding": "utf-8",
        }
    }
    loggers: Dict[str, Any] = {
        name: {"level": level.upper(), "handlers": ["file"], "propagate": False}
        for name in APP_LOGGERS
    }
    for key, stream, path in (
        ("errors", ERROR_STREAM, error_log),
        ("progress", PROGRESS_STREAM, progress_log),
    ):
        if path is None:
            continue
        handlers[key] = _stream_handler(path)
        loggers[stream] = {"level": "INFO", "handlers": [key], "propagate": False}
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {"()": "core.logging.JsonFormatter"},
                "stamped": {"()": "core.logging.StampedFormatter"},
            },
            "handlers": handlers,
            "loggers": loggers,
        }
    )


__all__ = ["configure_logging", "JsonFormatter", "StampedFormatter", "APP_LOGGERS"]
