"""User notification routing and the activity panel log."""

from .surface import ConfigWriter, NotificationLevel, NotificationSurface
from .activity_log import ActivityEntry, ActivityLog, LogCategory
from .messages import DEFAULT_MESSAGES, NotificationMessages
from .dispatcher import NotificationDispatcher

__all__ = [
    "ConfigWriter",
    "NotificationLevel",
    "NotificationSurface",
    "ActivityEntry",
    "ActivityLog",
    "LogCategory",
    "DEFAULT_MESSAGES",
    "NotificationMessages",
    "NotificationDispatcher",
]
