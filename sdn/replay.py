"""Replay recorded engine events through the observer."""
from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from .control.events import EventSide, TransferEvent
from .control.session import EventCallback


class ReplayEngine:
    """Stand-in for the transfer engine that feeds events from a log."""

    def __init__(self) -> None:
        self._callbacks: List[EventCallback] = []
        self._releases: List[Callable[[], None]] = []

    def add_event_callback(self, callback: EventCallback, release: Callable[[], None]) -> None:
        self._callbacks.append(callback)
        self._releases.append(release)

    def emit(self, events: Iterable[TransferEvent]) -> List[Any]:
        """Deliver *events* in order and collect every non-empty callback result."""

        results: List[Any] = []
        for event in events:
            for callback in self._callbacks:
                result = callback(event)
                if result is not None:
                    results.append(result)
        return results

    def finish(self) -> None:
        releases, self._releases = self._releases, []
        self._callbacks = []
        for release in releases:
            release()


def _event_from_dict(entry: Dict[str, Any], line_no: int) -> TransferEvent:
    if not isinstance(entry, dict) or "stage" not in entry:
        raise ValueError(f"line {line_no}: event requires a stage")
    side = entry.get("side", EventSide.NONE.value)
    try:
        event_side = EventSide(side)
    except ValueError as exc:
        raise ValueError(f"line {line_no}: unknown side '{side}'") from exc
    timestamp = entry.get("timestamp_ms", 0)
    try:
        timestamp_ms = int(timestamp)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"line {line_no}: invalid timestamp_ms '{timestamp}'") from exc
    return TransferEvent(
        stage=str(entry["stage"]),
        description=str(entry.get("description", "")),
        side=event_side,
        domain=str(entry.get("domain", "")),
        timestamp_ms=timestamp_ms,
    )


def read_events(path: Path) -> Iterator[TransferEvent]:
    """Yield events from a JSON lines file, skipping blank lines."""

    with path.open("r", encoding="utf-8") as fh:
        for line_no, line in enumerate(fh, start=1):
            if not line.strip():
                continue
            try:
                entry = json.loads(line)
            except json.JSONDecodeError as exc:
                raise ValueError(f"line {line_no}: {exc.msg}") from exc
            yield _event_from_dict(entry, line_no)


def jsonable(result: Optional[Any]) -> Any:
    if result is None:
        return None
    payload = asdict(result)
    payload["kind"] = "summary" if hasattr(result, "pair_count") else "endpoint"
    return payload


__all__ = ["ReplayEngine", "jsonable", "read_events"]
