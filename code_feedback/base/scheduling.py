"""Delayed-task scheduling primitives (public API facade).

Purpose
-------
Expose the timer abstraction behind the breaker reset and rate-limit
cooldowns via the canonical ``code_feedback.base.scheduling`` import path while
the concrete implementations live under ``scheduling_parts``.

Notes
-----
- ``LoopScheduler`` is the production scheduler (asyncio ``call_later``).
- ``VirtualScheduler`` runs on a virtual clock so tests can fast-forward.
- Every ``call_later`` returns a cancellable ``ScheduledHandle``.
"""

from .scheduling_parts.scheduled_handle import ScheduledHandle, Scheduler
from .scheduling_parts.loop_scheduler import LoopScheduler
from .scheduling_parts.virtual_scheduler import VirtualScheduler

__all__ = ["ScheduledHandle", "Scheduler", "LoopScheduler", "VirtualScheduler"]
