"""Fixed-capacity history of samples shown on screen."""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterator, Optional

from .models import Sample, WindowSummary
from .projection import window_scale

logger = logging.getLogger(__name__)


class SampleWindow:
    """Oldest-first FIFO of samples, one per chart column.

    Not thread-safe: the dashboard admits and renders from the same event
    loop thread, one cycle at a time.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"Window capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._items: deque[Sample] = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    def admit(self, sample: Sample) -> None:
        """Append a sample, evicting the single oldest one when full."""
        if len(self._items) >= self._capacity:
            evicted = self._items.popleft()
            logger.debug("Evicted sample from %s", evicted.timestamp)
        self._items.append(sample)

    def snapshot(self) -> tuple[Sample, ...]:
        """Return the current samples, oldest first."""
        return tuple(self._items)

    @property
    def latest(self) -> Optional[Sample]:
        return self._items[-1] if self._items else None

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def max_scale(self) -> int:
        """Largest reading across every sample and series in the window."""
        return window_scale(self._items)

    def summary(self) -> Optional[WindowSummary]:
        """Get header aggregates, or None while the window is empty."""
        if not self._items:
            return None
        return WindowSummary(
            min_value=min(s.min_value for s in self._items),
            avg_value=sum(s.avg_value for s in self._items) / len(self._items),
            max_value=max(s.max_value for s in self._items),
            latest=self._items[-1].timestamp,
        )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self.snapshot())
