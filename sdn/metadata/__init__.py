"""Metadata query backends."""
from .base import MetadataQuery, MetadataQueryError
from .local import LocalStatQuery, MappingQuery

__all__ = ["LocalStatQuery", "MappingQuery", "MetadataQuery", "MetadataQueryError"]
