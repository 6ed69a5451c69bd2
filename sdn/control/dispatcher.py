"""Event handler turning engine notifications into provisioning requests."""
from __future__ import annotations

import logging
from typing import Any, Optional, Union

from ..common.address import parse_endpoint
from ..common.pairs import PairRegistry, parse_pair
from ..common.uri import HostParser, parse_host
from ..config import Endpoint, TransferSummary
from ..errors import EndpointParseError, ProvisioningError
from ..logging_utils import log_summary, setup_logging
from ..metadata.base import MetadataQuery
from ..sinks.base import NotificationSink
from .aggregator import aggregate
from .events import EventStage, TransferEvent

DispatchResult = Optional[Union[TransferSummary, Endpoint]]


class NotificationDispatcher:
    """Consume the events of one transfer session.

    Listing events rebuild the pair registry, the end of a listing triggers
    the size aggregation and a summary for the sink, and passive mode
    descriptors are parsed into endpoints. Unknown stages are ignored.
    """

    def __init__(
        self,
        registry: PairRegistry,
        metadata_query: MetadataQuery,
        sink: NotificationSink,
        *,
        host_parser: HostParser = parse_host,
        context: Any = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.registry = registry
        self.metadata_query = metadata_query
        self.sink = sink
        self.host_parser = host_parser
        self.context = context
        self.total_size = 0
        self._logger = logger or setup_logging(self.__class__.__name__)

    def __call__(self, event: TransferEvent) -> DispatchResult:
        return self.dispatch(event.stage, event.description)

    def dispatch(self, stage: str, description: str = "") -> DispatchResult:
        """Handle one event; return what was sent to the sink, if anything."""

        known = EventStage.lookup(stage)
        if known is EventStage.BATCH_ENTER:
            self.registry.clear()
        elif known is EventStage.BATCH_ITEM:
            self._add_pair(description)
        elif known is EventStage.BATCH_EXIT:
            return self.notify_remote()
        elif known is EventStage.PASSIVE_MODE:
            return self.passive_endpoint(description)
        return None

    def _add_pair(self, description: str) -> None:
        pair = parse_pair(description)
        if pair.destination is None:
            self._logger.debug(
                "pair without destination", extra={"_sdn_description": description}
            )
        self.registry.append(pair)

    def summarize(self) -> TransferSummary:
        """Aggregate the registry and build the summary for the current batch."""

        self.total_size = aggregate(self.registry, self.metadata_query, logger=self._logger)
        source_host = destination_host = None
        first = self.registry.first_pair()
        if first is not None:
            source_host = self.host_parser(first.source)
            if first.destination is not None:
                destination_host = self.host_parser(first.destination)
        return TransferSummary(
            source_host=source_host,
            destination_host=destination_host,
            pair_count=len(self.registry),
            total_size=self.total_size,
        )

    def notify_remote(self) -> TransferSummary:
        summary = self.summarize()
        log_summary(self._logger, summary)
        try:
            self.sink.notify(summary)
        except ProvisioningError as exc:
            self._logger.error("provisioning request failed: %s", exc)
        return summary

    def passive_endpoint(self, description: str) -> Optional[Endpoint]:
        try:
            endpoint = parse_endpoint(description)
        except EndpointParseError as exc:
            self._logger.critical(str(exc), extra={"_sdn_description": description})
            return None
        self._logger.warning(
            "Got %s:%d for host %s",
            endpoint.ip,
            endpoint.port,
            endpoint.host,
            extra={"_sdn_host": endpoint.host, "_sdn_ip": endpoint.ip, "_sdn_port": endpoint.port},
        )
        try:
            self.sink.notify_endpoint(endpoint)
        except ProvisioningError as exc:
            self._logger.error("endpoint notification failed: %s", exc)
        return endpoint


__all__ = ["NotificationDispatcher"]
