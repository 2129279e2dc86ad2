"""Deterministic virtual-time scheduler.

Nothing runs until :meth:`VirtualScheduler.advance` moves the clock. Tests use
it to fast-forward the 10-minute breaker cooldown and rate-limit windows
without sleeping.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Callable, List, Optional, Tuple


class VirtualHandle:
    """Handle for a task queued on a :class:`VirtualScheduler`."""

    def __init__(self, deadline: float, on_cancel: Optional[Callable[[], None]] = None) -> None:
        self.deadline = deadline
        self._done = False
        self._cancelled = False
        self._on_cancel = on_cancel

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        return self._done

    def cancel(self) -> None:
        if self._done or self._cancelled:
            return
        self._cancelled = True
        if self._on_cancel is not None:
            self._on_cancel()


class VirtualScheduler:
    """``Scheduler`` implementation driven by an explicit virtual clock."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._seq = itertools.count()
        self._queue: List[Tuple[float, int, VirtualHandle, Callable[[], None]]] = []

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        """Number of queued tasks; cancelled tasks leave the queue immediately."""
        return len(self._queue)

    def time(self) -> float:
        """Clock function compatible with ``time.time`` call sites."""
        return self._now

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> VirtualHandle:
        handle = VirtualHandle(self._now + max(0.0, delay_seconds), self._compact)
        heapq.heappush(self._queue, (handle.deadline, next(self._seq), handle, callback))
        return handle

    def advance(self, seconds: float) -> int:
        """Move the clock forward and run every task that became due.

        Tasks scheduled by a running callback also fire if their deadline
        falls inside the window. Returns the number of callbacks run.
        """
        target = self._now + seconds
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            deadline, _, handle, callback = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self._now = max(self._now, deadline)
            handle._done = True
            callback()
            ran += 1
        self._now = target
        return ran

    def _compact(self) -> None:
        self._queue = [entry for entry in self._queue if not entry[2].cancelled]
        heapq.heapify(self._queue)


__all__ = ["VirtualScheduler", "VirtualHandle"]
