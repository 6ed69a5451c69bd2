"""Simple plugin registry for notification sinks."""
from __future__ import annotations

from typing import Any, Dict, FrozenSet, Type

from .base import NotificationSink
from .http import HttpProvisioningSink
from .logging_sink import LoggingSink
from .memory import RecordingSink

_REGISTRY: Dict[str, Type[NotificationSink]] = {
    LoggingSink.name: LoggingSink,
    HttpProvisioningSink.name: HttpProvisioningSink,
    RecordingSink.name: RecordingSink,
}


def get_sink(name: str, **options: Any) -> NotificationSink:
    try:
        sink_cls = _REGISTRY[name]
    except KeyError as exc:
        raise ValueError(f"unknown notification sink '{name}'") from exc
    return sink_cls(**options)


def register_sink(sink_cls: Type[NotificationSink]) -> None:
    _REGISTRY[sink_cls.name] = sink_cls


def available_sinks() -> FrozenSet[str]:
    return frozenset(_REGISTRY)


__all__ = ["available_sinks", "get_sink", "register_sink", "NotificationSink"]
