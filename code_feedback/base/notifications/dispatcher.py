"""Decide what to show the user after a provider failure.

The dispatcher turns a freshly recorded :class:`ClassifiedError` plus the
tracker's :class:`TrackerDecision` into at most one user notification, panel
log lines, and any recovery follow-up.

Routing
-------
- Breaker just tripped: one "paused" warning and one panel line; the per-kind
  notification is suppressed and the re-enable notice is attached to the
  tracker's pending reset.
- Breaker already open (in-flight call failed after the trip): panel line only.
- Otherwise per kind:

  ====================  ==============================================
  authentication        blocking prompt: settings / get key / disable
  rate_limit            warning with whole minutes; decay scheduled
  quota_exceeded        blocking prompt: billing / disable
  network               warning on the first failure of a streak only
  service_unavailable   warning every time
  unknown, not config   error toast for the first two failures only
  ====================  ==============================================

Blocking prompts are awaited in background tasks so ``dispatch`` itself never
suspends. Follow-up actions (open URL, write config) are best effort: a
failure is logged and dropped.
"""
from __future__ import annotations

import asyncio
import math
from typing import Callable, Dict, Optional, Sequence, Set

from ...config.defaults import (
    AI_ENABLED_SETTING,
    API_KEY_SETTING_PATHS,
    API_KEY_URLS,
    BILLING_URLS,
    DEFAULT_RETRY_AFTER_SECONDS,
    SETTINGS_ROOT,
)
from ..errors import ClassifiedError, ErrorKind
from ..logging import LogContext, get_logger, log_event
from ..resilience import FailureTracker, TrackerDecision
from .activity_log import ActivityLog, LogCategory
from .messages import DEFAULT_MESSAGES, NotificationMessages
from .surface import ConfigWriter, NotificationLevel, NotificationSurface

# Network warnings pop only for the first failure of a streak.
_NETWORK_TOAST_MAX_STREAK = 1
# Unknown errors pop for the first two failures of a streak.
_UNKNOWN_TOAST_MAX_STREAK = 2


class NotificationDispatcher:
    """Route classified failures to notifications, panel lines and recovery."""

    def __init__(
        self,
        tracker: FailureTracker,
        surface: NotificationSurface,
        config_writer: ConfigWriter,
        activity_log: ActivityLog,
        messages: Optional[NotificationMessages] = None,
    ) -> None:
        self._tracker = tracker
        self._surface = surface
        self._config_writer = config_writer
        self._activity = activity_log
        self._messages = messages or DEFAULT_MESSAGES
        self._pending: Set[asyncio.Task] = set()
        self._logger = get_logger("code_feedback.dispatcher")
        self._handlers: Dict[ErrorKind, Callable[[ClassifiedError, TrackerDecision], None]] = {
            ErrorKind.AUTHENTICATION: self._on_authentication,
            ErrorKind.RATE_LIMIT: self._on_rate_limit,
            ErrorKind.QUOTA_EXCEEDED: self._on_quota_exceeded,
            ErrorKind.NETWORK: self._on_network,
            ErrorKind.SERVICE_UNAVAILABLE: self._on_service_unavailable,
        }

    @property
    def messages(self) -> NotificationMessages:
        return self._messages

    @property
    def pending_prompts(self) -> int:
        return len(self._pending)

    def dispatch(self, error: ClassifiedError, decision: TrackerDecision) -> None:
        """Surface one recorded failure. Never suspends."""
        m = self._messages
        self._activity.append(m.error_prefix + m.simplified(error.kind), LogCategory.ERROR)

        if decision.tripped:
            self._on_breaker_tripped(error)
            return
        if decision.breaker_open:
            log_event(
                self._logger,
                "dispatch.suppressed",
                LogContext(provider=error.provider),
                kind=error.kind.value,
                consecutive_errors=decision.consecutive_errors,
            )
            return

        handler = self._handlers.get(error.kind, self._on_unknown)
        log_event(
            self._logger,
            "dispatch.route",
            LogContext(provider=error.provider),
            kind=error.kind.value,
            consecutive_errors=decision.consecutive_errors,
        )
        handler(error, decision)

    async def drain(self) -> None:
        """Wait until every outstanding prompt and its follow-up finished."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def cancel_pending(self) -> None:
        """Cancel outstanding prompts (teardown)."""
        for task in list(self._pending):
            task.cancel()
        self._pending.clear()

    # -------------------------------------------------------------- branches
    def _on_breaker_tripped(self, error: ClassifiedError) -> None:
        m = self._messages
        self._surface.notify(NotificationLevel.WARNING, m.too_many_errors_warning)
        self._activity.append(m.too_many_errors, LogCategory.ERROR)
        self._tracker.on_breaker_reset(self._announce_re_enabled)

    def _announce_re_enabled(self) -> None:
        m = self._messages
        self._surface.notify(NotificationLevel.INFO, m.ai_re_enabled)
        self._activity.append(m.re_enabled_log, LogCategory.INFO)

    def _on_authentication(self, error: ClassifiedError, decision: TrackerDecision) -> None:
        m = self._messages
        provider = error.provider or ""
        get_key = m.get_key_label(error.provider)
        title = f"{m.api_key_setup_title} ({m.provider_name(error.provider)})"
        choices = {
            m.open_settings: lambda: self._surface.open_settings(
                API_KEY_SETTING_PATHS.get(provider, SETTINGS_ROOT)
            ),
            get_key: lambda: self._open_if_known(API_KEY_URLS.get(provider)),
            m.disable_ai: lambda: self._disable_ai(m.disabled_by_user_log),
        }
        self._start_prompt(NotificationLevel.ERROR, title, [m.open_settings, get_key, m.disable_ai], choices)

    def _on_rate_limit(self, error: ClassifiedError, decision: TrackerDecision) -> None:
        m = self._messages
        wait = error.retry_after_seconds or DEFAULT_RETRY_AFTER_SECONDS
        minutes = math.ceil(wait / 60)
        self._surface.notify(NotificationLevel.WARNING, m.rate_limit_warning.format(minutes=minutes))
        self._tracker.schedule_rate_limit_recovery(
            wait,
            on_recovered=lambda: self._activity.append(m.rate_limit_passed_log, LogCategory.INFO),
        )

    def _on_quota_exceeded(self, error: ClassifiedError, decision: TrackerDecision) -> None:
        m = self._messages
        billing_url = BILLING_URLS.get(error.provider or "")
        choices = {
            m.check_billing: lambda: self._open_if_known(billing_url),
            m.disable_ai: lambda: self._disable_ai(m.disabled_quota_log),
        }
        self._start_prompt(
            NotificationLevel.ERROR,
            m.quota_exceeded_error,
            [m.check_billing, m.disable_ai],
            choices,
        )

    def _on_network(self, error: ClassifiedError, decision: TrackerDecision) -> None:
        if decision.consecutive_errors <= _NETWORK_TOAST_MAX_STREAK:
            self._surface.notify(NotificationLevel.WARNING, self._messages.network_warning)

    def _on_service_unavailable(self, error: ClassifiedError, decision: TrackerDecision) -> None:
        self._surface.notify(NotificationLevel.WARNING, self._messages.service_unavailable_warning)

    def _on_unknown(self, error: ClassifiedError, decision: TrackerDecision) -> None:
        if decision.consecutive_errors <= _UNKNOWN_TOAST_MAX_STREAK:
            self._surface.notify(
                NotificationLevel.ERROR,
                self._messages.unknown_error.format(message=error.message),
            )

    # ------------------------------------------------------------- follow-ups
    def _open_if_known(self, url: Optional[str]) -> None:
        if url:
            self._surface.open_url(url)

    def _disable_ai(self, log_line: str) -> None:
        self._config_writer.update(AI_ENABLED_SETTING, False)
        self._activity.append(log_line, LogCategory.ERROR)

    def _start_prompt(
        self,
        level: NotificationLevel,
        message: str,
        actions: Sequence[str],
        choices: Dict[str, Callable[[], None]],
    ) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._logger.warning("no running event loop; prompt %r not shown", message)
            return
        task = loop.create_task(self._run_prompt(level, message, actions, choices))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _run_prompt(
        self,
        level: NotificationLevel,
        message: str,
        actions: Sequence[str],
        choices: Dict[str, Callable[[], None]],
    ) -> None:
        try:
            picked = await self._surface.prompt(level, message, list(actions))
            action = choices.get(picked) if picked is not None else None
            if action is not None:
                log_event(self._logger, "dispatch.action", choice=picked)
                action()
        except asyncio.CancelledError:
            raise
        except Exception:
            self._logger.warning("prompt follow-up failed", exc_info=True)


__all__ = ["NotificationDispatcher"]
