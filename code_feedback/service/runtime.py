"""Composition root wiring the failure-handling core for one host session.

A :class:`FeedbackRuntime` owns exactly one :class:`FailureTracker`, so every
analysis trigger of the session shares the same breaker. Hosts construct it
with their notification surface and configuration writer, call
:meth:`analyze` from editor events and :meth:`apply_configuration` when the
user edits settings, and :meth:`aclose` on teardown.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Optional

import httpx

from ..base.logging import LogContext, get_logger, log_event
from ..base.models import AIConfig, ProviderKind
from ..base.notifications import (
    ActivityLog,
    ConfigWriter,
    LogCategory,
    NotificationDispatcher,
    NotificationMessages,
    NotificationSurface,
)
from ..base.resilience import FailureTracker
from ..base.scheduling import LoopScheduler, Scheduler
from ..config import get_ai_config
from ..config.defaults import AI_ENABLED_SETTING
from .gateway import ProviderGateway


class _RuntimeConfigWriter:
    """Forward writes to the host and mirror ``ai.enabled`` locally.

    The disable action takes effect for the very next call, without waiting
    for the host to echo the change back through ``apply_configuration``.
    """

    def __init__(self, runtime: "FeedbackRuntime", inner: ConfigWriter) -> None:
        self._runtime = runtime
        self._inner = inner

    def update(self, key: str, value: Any) -> None:
        self._inner.update(key, value)
        if key == AI_ENABLED_SETTING:
            self._runtime._set_enabled(bool(value))


class FeedbackRuntime:
    """Own the activity log, tracker, dispatcher and gateway of one session."""

    def __init__(
        self,
        surface: NotificationSurface,
        config_writer: ConfigWriter,
        *,
        config: Optional[AIConfig] = None,
        scheduler: Optional[Scheduler] = None,
        messages: Optional[NotificationMessages] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        activity_log: Optional[ActivityLog] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self._config = config if config is not None else get_ai_config()
        self.activity_log = activity_log or ActivityLog()
        scheduler = scheduler or LoopScheduler()
        # Failure timestamps follow the scheduler's clock when it keeps one.
        clock = clock or getattr(scheduler, "time", None) or time.time
        self.tracker = FailureTracker(scheduler, clock=clock)
        self.dispatcher = NotificationDispatcher(
            self.tracker,
            surface,
            _RuntimeConfigWriter(self, config_writer),
            self.activity_log,
            messages,
        )
        self.gateway = ProviderGateway(self.tracker, self.dispatcher, http_client=http_client)
        self._logger = get_logger("code_feedback.runtime")

    @property
    def config(self) -> AIConfig:
        return self._config

    def _set_enabled(self, enabled: bool) -> None:
        self._config = self._config.model_copy(update={"enabled": enabled})

    async def analyze(self, prompt: str) -> Optional[str]:
        """Request feedback for ``prompt``; ``None`` when nothing is available."""
        return await self.gateway.attempt_call(prompt, self._config)

    def apply_configuration(self, new_config: AIConfig) -> None:
        """Adopt edited settings and lift the breaker for a fixed credential.

        A provider switch is always announced in the panel. When the newly
        active provider has a key and the breaker is open, the tracker is
        reset immediately instead of waiting for the cooldown.
        """
        old, self._config = self._config, new_config
        messages = self.dispatcher.messages
        provider_changed = old.provider != new_config.provider
        keys_changed = any(
            old.settings_for(kind).api_key != new_config.settings_for(kind).api_key
            for kind in ProviderKind
        )

        if provider_changed:
            self.activity_log.append(
                messages.provider_changed.format(provider=messages.provider_name(new_config.provider.value)),
                LogCategory.INFO,
            )
        if not (provider_changed or keys_changed):
            return

        log_event(
            self._logger,
            "runtime.config_changed",
            LogContext(provider=new_config.provider.value),
            provider_changed=provider_changed,
            keys_changed=keys_changed,
        )
        if new_config.is_provider_configured() and self.tracker.temporarily_disabled:
            self.tracker.reset()
            self.activity_log.append(
                messages.provider_configured_log if provider_changed else messages.api_key_updated_log,
                LogCategory.INFO,
            )

    async def aclose(self) -> None:
        """Cancel timers and prompts and close the owned HTTP client."""
        self.tracker.shutdown()
        self.dispatcher.cancel_pending()
        await self.gateway.aclose()


__all__ = ["FeedbackRuntime"]
