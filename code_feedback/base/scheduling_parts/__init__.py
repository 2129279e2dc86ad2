"""Scheduling parts package public surface.

Prefer importing from `code_feedback.base.scheduling` for the stable surface.
"""

from .scheduled_handle import ScheduledHandle, Scheduler
from .loop_scheduler import LoopScheduler, LoopHandle
from .virtual_scheduler import VirtualScheduler, VirtualHandle

__all__ = [
    "ScheduledHandle",
    "Scheduler",
    "LoopScheduler",
    "LoopHandle",
    "VirtualScheduler",
    "VirtualHandle",
]
