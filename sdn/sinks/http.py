"""HTTP sink talking to a network provisioning service."""
from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, Optional

import httpx

from ..config import Endpoint, TransferSummary
from ..errors import ProvisioningError
from .base import NotificationSink


class HttpProvisioningSink(NotificationSink):
    """POST summaries to ``{url}/reservations`` and endpoints to ``{url}/endpoints``."""

    name = "http"

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 5.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if not url:
            raise ValueError("HTTP sink requires a provisioning url")
        self.url = url.rstrip("/")
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def notify(self, summary: TransferSummary) -> None:
        self._post("/reservations", asdict(summary))

    def notify_endpoint(self, endpoint: Endpoint) -> None:
        self._post("/endpoints", asdict(endpoint))

    def close(self) -> None:
        self._client.close()

    def _post(self, route: str, payload: Dict[str, Any]) -> None:
        target = f"{self.url}{route}"
        try:
            response = self._client.post(target, json=payload)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise ProvisioningError(
                f"Failed to notify provisioning service at {target}: {exc}"
            ) from exc


__all__ = ["HttpProvisioningSink"]
