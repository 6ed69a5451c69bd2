"""Per-copy sessions and the plugin hook that registers them with the engine."""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Protocol

from ..common.pairs import PairRegistry
from ..common.uri import HostParser, parse_host
from ..config import PLUGIN_NAME
from ..errors import SessionRegistrationError
from ..logging_utils import setup_logging
from ..metadata.base import MetadataQuery
from ..sinks.base import NotificationSink
from .dispatcher import DispatchResult, NotificationDispatcher
from .events import TransferEvent

EventCallback = Callable[[TransferEvent], Any]


class TransferEngine(Protocol):
    """The part of the transfer engine the plugin relies on."""

    def add_event_callback(self, callback: EventCallback, release: Callable[[], None]) -> None:
        """Register *callback* for the current copy; *release* runs on teardown."""


class SdnSession:
    """Owns the registry and collaborators of one copy operation."""

    def __init__(
        self,
        metadata_query: MetadataQuery,
        sink: NotificationSink,
        *,
        context: Any = None,
        host_parser: HostParser = parse_host,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.context = context
        self.registry = PairRegistry()
        self.metadata_query: Optional[MetadataQuery] = metadata_query
        self.sink = sink
        self.dispatcher = NotificationDispatcher(
            self.registry,
            metadata_query,
            sink,
            host_parser=host_parser,
            context=context,
            logger=logger,
        )
        self.closed = False

    def __call__(self, event: TransferEvent) -> DispatchResult:
        if self.closed:
            return None
        return self.dispatcher(event)

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self.registry.clear()
        query, self.metadata_query = self.metadata_query, None
        close_query = getattr(query, "close", None)
        if callable(close_query):
            close_query()

    def __enter__(self) -> "SdnSession":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class SdnPlugin:
    """Hooks a fresh :class:`SdnSession` into every copy started by the engine."""

    def __init__(
        self,
        metadata_factory: Callable[[Any], MetadataQuery],
        sink: NotificationSink,
        *,
        host_parser: HostParser = parse_host,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.metadata_factory = metadata_factory
        self.sink = sink
        self.host_parser = host_parser
        self._session_logger = logger
        self._logger = logger or setup_logging(self.__class__.__name__)

    @staticmethod
    def get_name() -> str:
        return PLUGIN_NAME

    def copy_enter_hook(self, engine: TransferEngine, context: Any = None) -> SdnSession:
        session = SdnSession(
            self.metadata_factory(context),
            self.sink,
            context=context,
            host_parser=self.host_parser,
            logger=self._session_logger,
        )
        try:
            engine.add_event_callback(session, session.close)
        except Exception as exc:
            session.close()
            raise SessionRegistrationError(f"copy_enter_hook: {exc}") from exc
        self._logger.info("SDN event listener registered", extra={"_sdn_plugin": PLUGIN_NAME})
        return session

    def close(self) -> None:
        self.sink.close()


__all__ = ["EventCallback", "SdnPlugin", "SdnSession", "TransferEngine"]
