"""Event handling package exports."""
from .aggregator import aggregate
from .dispatcher import NotificationDispatcher
from .events import EventSide, EventStage, TransferEvent
from .session import SdnPlugin, SdnSession, TransferEngine

__all__ = [
    "EventSide",
    "EventStage",
    "NotificationDispatcher",
    "SdnPlugin",
    "SdnSession",
    "TransferEngine",
    "TransferEvent",
    "aggregate",
]
