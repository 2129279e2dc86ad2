"""code_feedback package

Error classification and resilience core for AI-assisted code feedback.

Public API (re-exported):
    - Version: ``__version__``
    - Errors: :class:`ErrorKind`, :class:`ClassifiedError`, :func:`classify_failure`
    - Tracking: :class:`FailureTracker`, :class:`TrackerDecision`
    - Notifications: :class:`NotificationDispatcher`, :class:`ActivityLog`
    - Providers: :class:`ProviderGateway`, :class:`ProviderFactory`
    - Session: :class:`FeedbackRuntime`
    - Configuration: :func:`get_ai_config`, :class:`AIConfig`
"""

from .base import (
    ActivityLog,
    AIConfig,
    ClassifiedError,
    ErrorKind,
    FailureTracker,
    NotificationDispatcher,
    ProviderFactory,
    ProviderKind,
    TrackerDecision,
    VirtualScheduler,
    LoopScheduler,
    classify_failure,
)
from .config import get_ai_config
from .service import FeedbackRuntime, ProviderGateway

__version__ = "0.3.0"

__all__ = [
    "__version__",
    "ActivityLog",
    "AIConfig",
    "ClassifiedError",
    "ErrorKind",
    "FailureTracker",
    "FeedbackRuntime",
    "LoopScheduler",
    "NotificationDispatcher",
    "ProviderFactory",
    "ProviderGateway",
    "ProviderKind",
    "TrackerDecision",
    "VirtualScheduler",
    "classify_failure",
    "get_ai_config",
]
