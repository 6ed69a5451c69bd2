"""Metadata query interface."""
from __future__ import annotations

from typing import Protocol

from ..errors import MetadataQueryError


class MetadataQuery(Protocol):
    """Protocol for metadata backends."""

    def __call__(self, path: str) -> int:
        """Return the size of *path* in bytes or raise :class:`MetadataQueryError`."""


__all__ = ["MetadataQuery", "MetadataQueryError"]
