"""Observer reserving network paths for bulk file transfers."""
from .config import Endpoint, Pair, TransferSummary
from .control import NotificationDispatcher, SdnPlugin, SdnSession, TransferEvent
from .errors import (
    EndpointParseError,
    MetadataQueryError,
    ProvisioningError,
    SdnError,
    SessionRegistrationError,
)

__all__ = [
    "Endpoint",
    "EndpointParseError",
    "MetadataQueryError",
    "NotificationDispatcher",
    "Pair",
    "ProvisioningError",
    "SdnError",
    "SdnPlugin",
    "SdnSession",
    "SessionRegistrationError",
    "TransferEvent",
    "TransferSummary",
]
