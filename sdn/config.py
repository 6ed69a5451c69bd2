"""SDN observer configuration defaults."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


PLUGIN_NAME = "SDN"
PAIR_SEPARATOR = " => "
LOG_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"

# Stage tags emitted by the transfer engine.
STAGE_LIST_ENTER = "LIST:ENTER"
STAGE_LIST_ITEM = "LIST:ITEM"
STAGE_LIST_EXIT = "LIST:EXIT"
STAGE_PASV = "PASV"

# Capacity of the endpoint fields, terminator excluded.
HOST_FIELD_CAPACITY: int = 255
IP_FIELD_CAPACITY: int = 63


@dataclass(frozen=True)
class Pair:
    """A source/destination couple announced while listing a batch."""

    source: str
    destination: Optional[str] = None


@dataclass(frozen=True)
class Endpoint:
    """Data channel endpoint announced for a passive connection."""

    host: str
    ip: Optional[str] = None
    port: Optional[int] = None


@dataclass(frozen=True)
class TransferSummary:
    """Payload handed to the provisioning sink once a batch is listed."""

    source_host: Optional[str]
    destination_host: Optional[str]
    pair_count: int
    total_size: int

