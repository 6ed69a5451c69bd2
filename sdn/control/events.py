"""Events delivered by the transfer engine."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from ..config import STAGE_LIST_ENTER, STAGE_LIST_EXIT, STAGE_LIST_ITEM, STAGE_PASV


class EventStage(str, Enum):
    BATCH_ENTER = STAGE_LIST_ENTER
    BATCH_ITEM = STAGE_LIST_ITEM
    BATCH_EXIT = STAGE_LIST_EXIT
    PASSIVE_MODE = STAGE_PASV

    @classmethod
    def lookup(cls, stage: Union[str, "EventStage"]) -> Optional["EventStage"]:
        """Return the known stage for *stage*, ``None`` for anything else."""

        try:
            return cls(stage)
        except ValueError:
            return None


class EventSide(str, Enum):
    SOURCE = "SOURCE"
    DESTINATION = "DESTINATION"
    NONE = "NONE"


@dataclass(frozen=True)
class TransferEvent:
    stage: str
    description: str = ""
    side: EventSide = EventSide.NONE
    domain: str = ""
    timestamp_ms: int = field(default=0, compare=False)


__all__ = ["EventSide", "EventStage", "TransferEvent"]
