"""Parsers and containers shared by the observer."""
from .address import parse_endpoint, try_parse_endpoint
from .pairs import PairRegistry, parse_pair
from .uri import HostParser, parse_host

__all__ = [
    "HostParser",
    "PairRegistry",
    "parse_endpoint",
    "parse_host",
    "parse_pair",
    "try_parse_endpoint",
]
