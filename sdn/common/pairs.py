"""Pair descriptions announced while the engine lists a batch."""
from __future__ import annotations

from typing import Callable, Iterator, List, Optional

from ..config import PAIR_SEPARATOR, Pair


def parse_pair(description: str) -> Pair:
    """Split ``"source => destination"`` into a :class:`Pair`.

    Only the first separator counts. Without a separator the whole string is
    the source and the destination is ``None``. Both sides are kept exactly as
    the engine sent them, escaping included.
    """

    parts = description.split(PAIR_SEPARATOR, 1)
    if len(parts) == 1:
        return Pair(source=parts[0], destination=None)
    return Pair(source=parts[0], destination=parts[1])


class PairRegistry:
    """Ordered pairs of the batch currently being listed."""

    def __init__(self) -> None:
        self._pairs: List[Pair] = []

    def clear(self) -> None:
        self._pairs.clear()

    def append(self, pair: Pair) -> None:
        self._pairs.append(pair)

    def first_pair(self) -> Optional[Pair]:
        if not self._pairs:
            return None
        return self._pairs[0]

    def for_each(self, visitor: Callable[[Pair], None]) -> None:
        for pair in self._pairs:
            visitor(pair)

    def __iter__(self) -> Iterator[Pair]:
        return iter(list(self._pairs))

    def __len__(self) -> int:
        return len(self._pairs)


__all__ = ["PairRegistry", "parse_pair"]
