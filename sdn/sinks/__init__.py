"""Notification sink plugins."""
from .base import NotificationSink
from .http import HttpProvisioningSink
from .logging_sink import LoggingSink
from .memory import RecordingSink
from .registry import available_sinks, get_sink, register_sink

__all__ = [
    "HttpProvisioningSink",
    "LoggingSink",
    "NotificationSink",
    "RecordingSink",
    "available_sinks",
    "get_sink",
    "register_sink",
]
