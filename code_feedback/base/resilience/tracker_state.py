from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TrackerState(str, Enum):
    """Coarse breaker state derived from the failure count and disabled flag."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    DISABLED = "disabled"


@dataclass(frozen=True)
class FailureTrackerState:
    """Immutable snapshot of the tracker's mutable state."""

    consecutive_error_count: int = 0
    last_error_timestamp: Optional[float] = None
    temporarily_disabled: bool = False

    @property
    def state(self) -> TrackerState:
        if self.temporarily_disabled:
            return TrackerState.DISABLED
        if self.consecutive_error_count > 0:
            return TrackerState.DEGRADED
        return TrackerState.HEALTHY


@dataclass(frozen=True)
class TrackerDecision:
    """Outcome of recording one failure.

    Attributes:
        tripped: The breaker opened because of this failure.
        breaker_open: The breaker is open after this failure (either just
            tripped or already open when an in-flight call failed).
        consecutive_errors: Count after this failure was recorded.
    """

    tripped: bool
    breaker_open: bool
    consecutive_errors: int

    @property
    def state(self) -> TrackerState:
        if self.breaker_open:
            return TrackerState.DISABLED
        return TrackerState.DEGRADED


__all__ = ["TrackerState", "FailureTrackerState", "TrackerDecision"]
