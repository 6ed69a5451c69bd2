"""Base interface for provisioning sinks."""
from __future__ import annotations

from abc import ABC, abstractmethod

from ..config import Endpoint, TransferSummary
from ..errors import ProvisioningError


class NotificationSink(ABC):
    """Receives what the observer learned about a transfer."""

    name: str

    @abstractmethod
    def notify(self, summary: TransferSummary) -> None:
        """Reserve resources for a listed batch."""

    @abstractmethod
    def notify_endpoint(self, endpoint: Endpoint) -> None:
        """Report the data channel endpoint of a passive connection."""

    def close(self) -> None:
        """Release any handle held by the sink."""


__all__ = ["NotificationSink", "ProvisioningError"]
