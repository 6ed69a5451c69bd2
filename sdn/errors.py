"""Error hierarchy for the SDN observer."""
from __future__ import annotations


class SdnError(RuntimeError):
    """Base class for every error raised by the observer."""


class EndpointParseError(SdnError, ValueError):
    """Raised when a passive mode descriptor does not follow host:[ip]:port."""

    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(f"The description could not be parsed: {description}")


class MetadataQueryError(SdnError):
    """Raised by metadata backends when a path cannot be stat'ed."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Could not stat {path} ({detail})")


class ProvisioningError(SdnError):
    """Raised when a sink cannot deliver a notification."""


class SessionRegistrationError(SdnError):
    """Raised when the engine refuses to register the event listener."""


__all__ = [
    "EndpointParseError",
    "MetadataQueryError",
    "ProvisioningError",
    "SdnError",
    "SessionRegistrationError",
]
