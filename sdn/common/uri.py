"""Host extraction from transfer URIs."""
from __future__ import annotations

from typing import Callable, Optional
from urllib.parse import urlsplit

HostParser = Callable[[str], Optional[str]]


def parse_host(uri: Optional[str]) -> Optional[str]:
    """Return the host component of *uri*, or ``None`` when it has none."""

    if not uri:
        return None
    try:
        host = urlsplit(uri).hostname
    except ValueError:
        return None
    return host or None


__all__ = ["HostParser", "parse_host"]
