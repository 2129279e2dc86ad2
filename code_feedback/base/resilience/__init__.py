"""Failure tracking and breaker primitives."""

from .tracker_state import FailureTrackerState, TrackerDecision, TrackerState
from .failure_tracker import FailureTracker

__all__ = ["FailureTracker", "FailureTrackerState", "TrackerDecision", "TrackerState"]
