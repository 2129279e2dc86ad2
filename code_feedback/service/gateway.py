"""Gated provider calls with classification, tracking and notification.

``ProviderGateway.attempt_call`` is the single entry point editor-event
handlers use. It never raises for provider failures: every failure is
classified, recorded on the :class:`FailureTracker` and handed to the
:class:`NotificationDispatcher`, and the caller receives ``None``.

Only ``asyncio.CancelledError`` propagates, so callers can still cancel an
in-flight analysis.
"""

from __future__ import annotations

from typing import Dict, Optional, Type

import httpx

from ..base.errors import ClassifiedError, classify_failure, provider_not_configured_error
from ..base.factory import ProviderFactory
from ..base.http import build_async_client
from ..base.interfaces import CompletionProvider
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import AIConfig, ProviderKind
from ..base.notifications import NotificationDispatcher
from ..base.resilience import FailureTracker


class ProviderGateway:
    """Invoke the configured provider behind the failure tracker."""

    def __init__(
        self,
        tracker: FailureTracker,
        dispatcher: NotificationDispatcher,
        *,
        factory: Type[ProviderFactory] = ProviderFactory,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._tracker = tracker
        self._dispatcher = dispatcher
        self._factory = factory
        self._client = http_client
        self._owns_client = http_client is None
        self._providers: Dict[ProviderKind, CompletionProvider] = {}
        self._logger = get_logger("code_feedback.gateway")

    @property
    def tracker(self) -> FailureTracker:
        return self._tracker

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = build_async_client()
        return self._client

    def _get_provider(self, kind: ProviderKind) -> CompletionProvider:
        provider = self._providers.get(kind)
        if provider is None:
            provider = self._factory.create(kind)
            self._providers[kind] = provider
        return provider

    async def attempt_call(self, prompt: str, config: AIConfig) -> Optional[str]:
        """Run one completion through the active provider.

        Returns the trimmed completion text, or ``None`` when calls are gated,
        the provider is not configured, the call failed, or the provider
        answered without text.
        """
        if not config.enabled or not self._tracker.is_call_allowed():
            log_event(
                self._logger,
                "gateway.skipped",
                LogContext(provider=config.provider.value),
                enabled=config.enabled,
                breaker_open=not self._tracker.is_call_allowed(),
            )
            return None

        kind = config.provider
        settings = config.active_settings
        ctx = LogContext(provider=kind.value, model=settings.model)

        if not settings.is_configured():
            self._handle_failure(
                provider_not_configured_error(
                    kind.value, self._dispatcher.messages.provider_config_missing
                )
            )
            return None

        provider = self._get_provider(kind)
        log_event(self._logger, "gateway.call", ctx)
        try:
            content = await provider.complete(
                prompt,
                settings,
                provider.default_system_message(settings),
                self._get_client(),
                max_tokens=config.max_tokens,
                temperature=config.temperature,
            )
        except Exception as exc:  # CancelledError is a BaseException and propagates
            self._handle_failure(classify_failure(exc, provider=kind.value))
            return None

        self._tracker.record_success()
        log_event(self._logger, "gateway.success", ctx, empty=content is None)
        return content

    def _handle_failure(self, error: ClassifiedError) -> None:
        log_event(
            self._logger,
            "gateway.failure",
            LogContext(provider=error.provider),
            **error.to_dict(),
        )
        decision = self._tracker.record_failure(error)
        self._dispatcher.dispatch(error, decision)

    async def aclose(self) -> None:
        """Close the HTTP client when this gateway created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None


__all__ = ["ProviderGateway"]
