"""
Code Feedback Base Package

Provider-agnostic core: failure taxonomy and classification, the failure
tracker with its breaker, the notification dispatcher, the scheduler
abstraction, configuration models and the provider factory.
"""

from .errors import ClassifiedError, ErrorKind, classify_failure
from .factory import ProviderFactory, UnknownProviderError
from .interfaces import CompletionProvider
from .models import AIConfig, ProviderKind, ProviderSettings
from .notifications import (
    ActivityLog,
    LogCategory,
    NotificationDispatcher,
    NotificationLevel,
    NotificationMessages,
)
from .resilience import FailureTracker, FailureTrackerState, TrackerDecision, TrackerState
from .scheduling import LoopScheduler, ScheduledHandle, Scheduler, VirtualScheduler
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    # Errors
    "ErrorKind",
    "ClassifiedError",
    "classify_failure",
    # Providers
    "CompletionProvider",
    "ProviderFactory",
    "UnknownProviderError",
    # Models
    "AIConfig",
    "ProviderKind",
    "ProviderSettings",
    # Resilience
    "FailureTracker",
    "FailureTrackerState",
    "TrackerDecision",
    "TrackerState",
    # Notifications
    "ActivityLog",
    "LogCategory",
    "NotificationDispatcher",
    "NotificationLevel",
    "NotificationMessages",
    # Scheduling
    "ScheduledHandle",
    "Scheduler",
    "LoopScheduler",
    "VirtualScheduler",
    # Timeouts
    "TimeoutConfig",
    "get_timeout_config",
]
