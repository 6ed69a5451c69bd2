"""Sink keeping every notification in memory."""
from __future__ import annotations

from typing import List

from ..config import Endpoint, TransferSummary
from .base import NotificationSink


class RecordingSink(NotificationSink):
    """Record summaries and endpoints in arrival order."""

    name = "memory"

    def __init__(self) -> None:
        self.summaries: List[TransferSummary] = []
        self.endpoints: List[Endpoint] = []
        self.closed = False

    def notify(self, summary: TransferSummary) -> None:
        self.summaries.append(summary)

    def notify_endpoint(self, endpoint: Endpoint) -> None:
        self.endpoints.append(endpoint)

    def close(self) -> None:
        self.closed = True


__all__ = ["RecordingSink"]
