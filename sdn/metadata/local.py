"""Metadata backends answering from the local filesystem or from memory."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional
from urllib.parse import unquote, urlsplit

from ..errors import MetadataQueryError
from .base import MetadataQuery


class LocalStatQuery(MetadataQuery):
    """Stat plain paths and ``file://`` URIs."""

    def __init__(self, root: Optional[Path] = None) -> None:
        self.root = root

    def resolve(self, path: str) -> Path:
        parts = urlsplit(path)
        if parts.scheme == "file":
            return Path(unquote(parts.path))
        if parts.scheme and len(parts.scheme) > 1:
            raise MetadataQueryError(path, f"unsupported scheme '{parts.scheme}'")
        local = Path(path)
        if self.root is not None and not local.is_absolute():
            local = self.root / local
        return local

    def __call__(self, path: str) -> int:  # type: ignore[override]
        local = self.resolve(path)
        try:
            return os.stat(local).st_size
        except OSError as exc:
            raise MetadataQueryError(path, exc.strerror or str(exc)) from exc


class MappingQuery(MetadataQuery):
    """Answer sizes from a fixed mapping; unknown paths fail."""

    def __init__(self, sizes: Mapping[str, int]) -> None:
        self.sizes = dict(sizes)
        self.calls: list[str] = []

    def __call__(self, path: str) -> int:  # type: ignore[override]
        self.calls.append(path)
        try:
            return int(self.sizes[path])
        except KeyError as exc:
            raise MetadataQueryError(path, "No such file or directory") from exc


__all__ = ["LocalStatQuery", "MappingQuery"]
