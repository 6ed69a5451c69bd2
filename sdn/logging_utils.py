"""Structured logging utilities for the SDN observer."""
from __future__ import annotations

import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional, TextIO

from .config import LOG_TIME_FORMAT, TransferSummary


class JsonFormatter(logging.Formatter):
    """Simple JSON formatter for SDN logs."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, LOG_TIME_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key.startswith("_sdn_"):
                payload[key[5:]] = value
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(
    name: str,
    *,
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
    max_bytes: int = 20 * 1024 * 1024,
    backup_count: int = 5,
) -> logging.Logger:
    """Configure and return a logger with JSON formatting."""

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = JsonFormatter()
    stream_handler = logging.StreamHandler(stream or sys.stdout)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file:
        rotating = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count)
        rotating.setFormatter(formatter)
        logger.addHandler(rotating)

    return logger


def log_summary(
    logger: logging.Logger,
    summary: TransferSummary,
    *,
    level: int = logging.WARNING,
) -> None:
    """Emit a structured entry describing a listed batch."""

    extra = {
        "_sdn_source_host": summary.source_host,
        "_sdn_destination_host": summary.destination_host,
        "_sdn_pair_count": summary.pair_count,
        "_sdn_total_size": summary.total_size,
    }
    logger.log(
        level,
        "Between %s and %s %d files with a total size of %d bytes",
        summary.source_host,
        summary.destination_host,
        summary.pair_count,
        summary.total_size,
        extra=extra,
    )
