"""Anthropic Claude messages adapter."""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from ..base.interfaces import CompletionProvider
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import ProviderKind, ProviderSettings
from ..config.defaults import (
    CLAUDE_API_VERSION,
    CLAUDE_DEFAULT_BASE_URL,
    COMPLETION_MAX_TOKENS,
    COMPLETION_TEMPERATURE,
)

__all__ = ["ClaudeProvider"]


class ClaudeProvider(CompletionProvider):
    """Adapter for ``POST {base_url}/messages``.

    The system prompt goes in the top-level ``system`` field; ``messages``
    carries only the user turn.
    """

    kind = ProviderKind.CLAUDE
    default_base_url = CLAUDE_DEFAULT_BASE_URL

    def __init__(self) -> None:
        self._logger = get_logger("providers.claude")

    def build_payload(
        self,
        prompt: str,
        settings: ProviderSettings,
        system_message: str,
        *,
        max_tokens: int = COMPLETION_MAX_TOKENS,
        temperature: float = COMPLETION_TEMPERATURE,
    ) -> Dict[str, Any]:
        return {
            "model": settings.model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "system": system_message,
            "messages": [{"role": "user", "content": prompt}],
        }

    async def complete(
        self,
        prompt: str,
        settings: ProviderSettings,
        system_message: str,
        client: httpx.AsyncClient,
        *,
        max_tokens: int = COMPLETION_MAX_TOKENS,
        temperature: float = COMPLETION_TEMPERATURE,
    ) -> Optional[str]:
        payload = self.build_payload(
            prompt, settings, system_message, max_tokens=max_tokens, temperature=temperature
        )
        headers = {
            "x-api-key": settings.api_key or "",
            "anthropic-version": CLAUDE_API_VERSION,
            "Content-Type": "application/json",
        }
        log_event(
            self._logger,
            "provider.request",
            LogContext(provider=self.provider_name, model=settings.model),
        )
        resp = await client.post(f"{self.base_url(settings)}/messages", json=payload, headers=headers)
        resp.raise_for_status()
        return self.extract_text(resp.json())

    def extract_text(self, data: Any) -> Optional[str]:
        try:
            return self._clean(data["content"][0]["text"])
        except (KeyError, IndexError, TypeError):
            return None
