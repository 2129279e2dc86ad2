"""Scheduler backed by the running asyncio event loop.

Callbacks run as later turns of the loop, so they never interleave with the
synchronous tracker and dispatcher code. The loop is resolved when a task is
scheduled, which lets the scheduler be constructed outside of a loop.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Optional

from ..logging import get_logger


class LoopHandle:
    """Wrap an ``asyncio.TimerHandle`` and track completion."""

    def __init__(self) -> None:
        self._timer: Optional[asyncio.TimerHandle] = None
        self._done = False
        self._cancelled = False

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
        if self._timer is not None:
            self._timer.cancel()

    def _bind(self, timer: asyncio.TimerHandle) -> None:
        self._timer = timer

    def _mark_done(self) -> None:
        self._done = True


class LoopScheduler:
    """``Scheduler`` implementation using ``loop.call_later``."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop
        self._logger = get_logger("code_feedback.scheduler")

    def _resolve_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None or self._loop.is_closed():
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> LoopHandle:
        handle = LoopHandle()

        def _run() -> None:
            handle._mark_done()
            try:
                callback()
            except Exception:
                self._logger.exception("scheduled callback failed")

        handle._bind(self._resolve_loop().call_later(max(0.0, delay_seconds), _run))
        return handle


__all__ = ["LoopScheduler", "LoopHandle"]
