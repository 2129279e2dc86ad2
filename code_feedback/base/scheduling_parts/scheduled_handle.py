"""Scheduler protocol and the handle returned for each delayed task."""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class ScheduledHandle(Protocol):
    """A one-shot delayed task that can be cancelled before it fires."""

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether ``cancel`` was called before the task ran."""
        ...

    @property
    def done(self) -> bool:  # noqa: D401 - short form
        """Whether the callback has already run."""
        ...

    def cancel(self) -> None:
        """Prevent the callback from running; no-op once done."""
        ...


@runtime_checkable
class Scheduler(Protocol):
    """Runs zero-argument callbacks after a delay expressed in seconds."""

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> ScheduledHandle:
        ...


__all__ = ["ScheduledHandle", "Scheduler"]
