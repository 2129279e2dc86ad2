"""Outbound collaborator contracts used by the notification dispatcher.

The editor host implements these; the core never talks to UI toolkits or
configuration stores directly.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Awaitable, Optional, Protocol, Sequence, runtime_checkable


class NotificationLevel(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@runtime_checkable
class NotificationSurface(Protocol):
    """User-facing notification and navigation surface."""

    def notify(self, level: NotificationLevel, message: str) -> None:
        """Show a non-blocking notification."""
        ...

    def prompt(
        self, level: NotificationLevel, message: str, actions: Sequence[str]
    ) -> Awaitable[Optional[str]]:
        """Show a blocking prompt; resolves to the chosen action label or None."""
        ...

    def open_url(self, url: str) -> None:
        ...

    def open_settings(self, setting_path: str) -> None:
        ...


@runtime_checkable
class ConfigWriter(Protocol):
    """Persists a single configuration value (e.g. ``ai.enabled``)."""

    def update(self, key: str, value: Any) -> None:
        ...


__all__ = ["NotificationLevel", "NotificationSurface", "ConfigWriter"]
