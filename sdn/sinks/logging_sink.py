"""Sink that only logs what it is told."""
from __future__ import annotations

import logging
from typing import Optional

from ..config import Endpoint, TransferSummary
from ..logging_utils import log_summary, setup_logging
from .base import NotificationSink


class LoggingSink(NotificationSink):
    """Default sink used until a provisioning backend is configured."""

    name = "log"

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or setup_logging(self.__class__.__name__)

    def notify(self, summary: TransferSummary) -> None:
        log_summary(self._logger, summary, level=logging.INFO)

    def notify_endpoint(self, endpoint: Endpoint) -> None:
        self._logger.info(
            "endpoint %s:%s for host %s",
            endpoint.ip,
            endpoint.port,
            endpoint.host,
            extra={
                "_sdn_host": endpoint.host,
                "_sdn_ip": endpoint.ip,
                "_sdn_port": endpoint.port,
            },
        )


__all__ = ["LoggingSink"]
