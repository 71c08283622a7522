import asyncio
from collections import deque
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from average_calculator.core.logger import get_logger
from average_calculator.metrics import WINDOW_SIZE

logger = get_logger("window.store")


def mean(values: Sequence[int]) -> float:
    """Arithmetic mean, 0 for an empty sequence."""
    if not values:
        return 0
    return sum(values) / len(values)


@dataclass(frozen=True)
class MergeResult:
    """Snapshots of the window taken right before and right after a merge."""

    previous: List[int]
    current: List[int]

    @property
    def average(self) -> float:
        return mean(self.current)


class WindowStore:
    """Fixed-capacity window of distinct integers in arrival order.

    Notes:
        - Merging is the only mutation. Values already in the window are
          skipped, the rest are appended in order.
        - Overflow evicts from the front, so the window always holds the
          newest ``capacity`` values of (window + unique new values).
        - Every read and write goes through one lock, so a snapshot never
          observes a half-applied merge.
    """

    def __init__(self, capacity: int):
        if capacity <= 0:
            raise ValueError(f"Window capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._window: deque[int] = deque(maxlen=capacity)
        self._lock = asyncio.Lock()

    async def merge(self, numbers: Iterable[int]) -> MergeResult:
        async with self._lock:
            previous = list(self._window)
            seen = set(previous)
            unique_new = []
            for n in numbers:
                if n not in seen:
                    seen.add(n)
                    unique_new.append(n)

            if not unique_new:
                logger.debug("window_unchanged", extra={"size": len(previous)})
                return MergeResult(previous=previous, current=list(previous))

            overflow = len(previous) + len(unique_new) - self.capacity
            # maxlen drops from the left as we extend
            self._window.extend(unique_new)
            current = list(self._window)
            WINDOW_SIZE.set(len(current))
            logger.debug(
                "window_merged",
                extra={
                    "unique_new": len(unique_new),
                    "evicted": min(max(overflow, 0), len(previous)),
                    "dropped": max(len(unique_new) - self.capacity, 0),
                    "size": len(current),
                },
            )
            return MergeResult(previous=previous, current=current)

    async def snapshot(self) -> List[int]:
        async with self._lock:
            return list(self._window)

    async def average(self) -> float:
        async with self._lock:
            return mean(self._window)
