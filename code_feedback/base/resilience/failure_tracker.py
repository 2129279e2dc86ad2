"""Consecutive-failure tracking with a temporary-disable breaker.

Purpose
-------
Own the single, process-wide failure state shared by every analysis trigger:
the consecutive error count, the time of the last failure, and the
temporarily-disabled flag. Callers mutate that state only through the
methods below.

Behavior
--------
- Every recorded failure increments the count. Reaching ``threshold``
  (3 by default) opens the breaker and schedules one reset after
  ``cooldown_seconds`` (10 minutes) that zeroes the count and closes it.
- A success zeroes the count.
- A rate-limit cooldown decrements the count by one (never below zero) when
  it elapses, whereas the breaker reset zeroes it.
- While the breaker is open ``is_call_allowed()`` is False.

Timer semantics
---------------
Timers are one-shot and run to completion. A failure recorded while the
breaker is already open does not reschedule the pending reset. Overlapping
rate-limit cooldowns are not de-duplicated; the floored decrement keeps them
safe. ``shutdown()`` cancels everything still pending.
"""
from __future__ import annotations

import time
from typing import Callable, List, Optional, Set

from ...config.defaults import (
    BREAKER_COOLDOWN_SECONDS,
    BREAKER_ERROR_THRESHOLD,
    DEFAULT_RETRY_AFTER_SECONDS,
)
from ..errors import ClassifiedError
from ..logging import LogContext, get_logger, log_event
from ..scheduling import ScheduledHandle, Scheduler
from .tracker_state import FailureTrackerState, TrackerDecision, TrackerState


class FailureTracker:
    """Track consecutive provider failures and gate calls while disabled."""

    def __init__(
        self,
        scheduler: Scheduler,
        *,
        threshold: int = BREAKER_ERROR_THRESHOLD,
        cooldown_seconds: float = BREAKER_COOLDOWN_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if threshold < 1:
            raise ValueError("threshold must be >= 1")
        self._scheduler = scheduler
        self._threshold = threshold
        self._cooldown_seconds = cooldown_seconds
        self._clock = clock
        self._count = 0
        self._last_error_at: Optional[float] = None
        self._disabled = False
        self._reset_handle: Optional[ScheduledHandle] = None
        self._reset_listeners: List[Callable[[], None]] = []
        self._rate_limit_handles: Set[ScheduledHandle] = set()
        self._logger = get_logger("code_feedback.tracker")

    # ------------------------------------------------------------------ state
    @property
    def consecutive_error_count(self) -> int:
        return self._count

    @property
    def temporarily_disabled(self) -> bool:
        return self._disabled

    @property
    def last_error_timestamp(self) -> Optional[float]:
        return self._last_error_at

    @property
    def state(self) -> TrackerState:
        return self.snapshot().state

    @property
    def threshold(self) -> int:
        return self._threshold

    @property
    def cooldown_seconds(self) -> float:
        return self._cooldown_seconds

    def snapshot(self) -> FailureTrackerState:
        return FailureTrackerState(
            consecutive_error_count=self._count,
            last_error_timestamp=self._last_error_at,
            temporarily_disabled=self._disabled,
        )

    def is_call_allowed(self) -> bool:
        """Return False while the breaker is open."""
        return not self._disabled

    # ------------------------------------------------------------ transitions
    def record_failure(self, error: ClassifiedError) -> TrackerDecision:
        """Count a classified failure and open the breaker on the threshold.

        Returns a :class:`TrackerDecision`; ``tripped`` is True only for the
        failure that moved the tracker from closed to open.
        """
        self._count += 1
        self._last_error_at = self._clock()
        ctx = LogContext(provider=error.provider)

        if self._disabled:
            log_event(
                self._logger,
                "tracker.failure",
                ctx,
                kind=error.kind.value,
                consecutive_errors=self._count,
                breaker_open=True,
            )
            return TrackerDecision(tripped=False, breaker_open=True, consecutive_errors=self._count)

        if self._count >= self._threshold:
            self._disabled = True
            self._reset_handle = self._scheduler.call_later(self._cooldown_seconds, self._on_cooldown_elapsed)
            log_event(
                self._logger,
                "tracker.tripped",
                ctx,
                kind=error.kind.value,
                consecutive_errors=self._count,
                cooldown_seconds=self._cooldown_seconds,
            )
            return TrackerDecision(tripped=True, breaker_open=True, consecutive_errors=self._count)

        log_event(
            self._logger,
            "tracker.failure",
            ctx,
            kind=error.kind.value,
            consecutive_errors=self._count,
            breaker_open=False,
        )
        return TrackerDecision(tripped=False, breaker_open=False, consecutive_errors=self._count)

    def record_success(self) -> None:
        """Zero the failure count. The breaker flag is left untouched."""
        if self._count:
            log_event(self._logger, "tracker.success", previous_errors=self._count)
        self._count = 0

    def schedule_rate_limit_recovery(
        self,
        retry_after_seconds: Optional[int],
        on_recovered: Optional[Callable[[], None]] = None,
    ) -> ScheduledHandle:
        """Decrement the count by one once ``retry_after_seconds`` elapse."""
        delay = retry_after_seconds or DEFAULT_RETRY_AFTER_SECONDS
        handle: Optional[ScheduledHandle] = None

        def _recover() -> None:
            self._rate_limit_handles.discard(handle)
            self._count = max(0, self._count - 1)
            log_event(
                self._logger,
                "tracker.rate_limit_recovered",
                consecutive_errors=self._count,
            )
            if on_recovered is not None:
                on_recovered()

        handle = self._scheduler.call_later(delay, _recover)
        self._rate_limit_handles.add(handle)
        return handle

    def on_breaker_reset(self, callback: Callable[[], None]) -> None:
        """Run ``callback`` once, right after the pending breaker reset fires.

        Ignored when the breaker is not open.
        """
        if self._disabled:
            self._reset_listeners.append(callback)

    def reset(self) -> None:
        """Clear all failure state immediately.

        Used when the configuration changes to an apparently valid credential.
        Cancels the pending breaker reset and forgets its listeners.
        """
        was_disabled = self._disabled
        self._cancel_reset_timer()
        self._reset_listeners.clear()
        self._count = 0
        self._disabled = False
        log_event(self._logger, "tracker.reset", reason="configuration", was_disabled=was_disabled)

    def shutdown(self) -> None:
        """Cancel every pending timer (teardown)."""
        self._cancel_reset_timer()
        self._reset_listeners.clear()
        for handle in list(self._rate_limit_handles):
            handle.cancel()
        self._rate_limit_handles.clear()

    # ---------------------------------------------------------------- helpers
    def _cancel_reset_timer(self) -> None:
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None

    def _on_cooldown_elapsed(self) -> None:
        self._reset_handle = None
        self._count = 0
        self._disabled = False
        log_event(self._logger, "tracker.reset", reason="cooldown")
        listeners, self._reset_listeners = self._reset_listeners, []
        for listener in listeners:
            try:
                listener()
            except Exception:
                self._logger.exception("breaker reset listener failed")


__all__ = ["FailureTracker"]
