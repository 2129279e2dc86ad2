"""In-memory activity log backing the feedback panel.

Keeps only the most recent entries (50 by default). An optional ``on_append``
listener is told about each new entry so the panel can re-render.
"""
from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Deque, List, Optional

from ...config.defaults import ACTIVITY_LOG_CAPACITY
from ..logging import get_logger


class LogCategory(str, Enum):
    CURSOR = "cursor"
    NEWLINE = "newline"
    AI = "ai"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class ActivityEntry:
    message: str
    category: LogCategory
    timestamp: float


class ActivityLog:
    """Capped, append-only list of panel entries (oldest dropped first)."""

    def __init__(
        self,
        capacity: int = ACTIVITY_LOG_CAPACITY,
        *,
        on_append: Optional[Callable[[ActivityEntry], None]] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._entries: Deque[ActivityEntry] = deque(maxlen=capacity)
        self._on_append = on_append
        self._clock = clock
        self._logger = get_logger("code_feedback.activity")

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or 0

    def append(self, message: str, category: LogCategory = LogCategory.INFO) -> ActivityEntry:
        entry = ActivityEntry(message=message, category=LogCategory(category), timestamp=self._clock())
        self._entries.append(entry)
        if self._on_append is not None:
            try:
                self._on_append(entry)
            except Exception:
                self._logger.warning("activity panel refresh failed", exc_info=True)
        return entry

    def entries(self) -> List[ActivityEntry]:
        return list(self._entries)

    def messages(self) -> List[str]:
        return [e.message for e in self._entries]

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["ActivityLog", "ActivityEntry", "LogCategory"]
