"""Parsing of passive mode descriptors (``host:[ip]:port``)."""
from __future__ import annotations

import re
from typing import Union

from ..config import HOST_FIELD_CAPACITY, IP_FIELD_CAPACITY, Endpoint
from ..errors import EndpointParseError

# The ip is always bracketed, even for IPv4, so colons inside it stay unambiguous.
_PASV_PATTERN = re.compile(r"([a-zA-Z0-9._-]+):\[([0-9a-f.:]+)\]:([0-9]+)")


def _bounded(value: str, capacity: int) -> str:
    """Truncate *value* to at most *capacity* characters."""

    return value[:capacity]


def parse_endpoint(description: str) -> Endpoint:
    """Return the :class:`Endpoint` described by *description*.

    The pattern is searched anywhere in the description. Host and ip longer
    than their field capacity are truncated rather than rejected.

    Raises:
        EndpointParseError: if the description does not contain a descriptor.
    """

    match = _PASV_PATTERN.search(description)
    if match is None:
        raise EndpointParseError(description)
    host, ip, port = match.groups()
    return Endpoint(
        host=_bounded(host, HOST_FIELD_CAPACITY),
        ip=_bounded(ip, IP_FIELD_CAPACITY),
        port=int(port, 10),
    )


def try_parse_endpoint(description: str) -> Union[Endpoint, EndpointParseError]:
    """Like :func:`parse_endpoint` but hands the error back as a value."""

    try:
        return parse_endpoint(description)
    except EndpointParseError as exc:
        return exc


__all__ = ["parse_endpoint", "try_parse_endpoint"]
