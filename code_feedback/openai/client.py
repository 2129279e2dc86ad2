"""OpenAI chat-completions adapter.

Sends a single system + user exchange to ``POST {base_url}/chat/completions``
with bearer authentication and returns the first choice's message text.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from ..base.interfaces import CompletionProvider
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import ProviderKind, ProviderSettings
from ..config.defaults import COMPLETION_MAX_TOKENS, COMPLETION_TEMPERATURE, OPENAI_DEFAULT_BASE_URL

__all__ = ["OpenAIProvider"]


class OpenAIProvider(CompletionProvider):
    """Adapter for the OpenAI chat completions endpoint."""

    kind = ProviderKind.OPENAI
    default_base_url = OPENAI_DEFAULT_BASE_URL

    def __init__(self) -> None:
        self._logger = get_logger("providers.openai")

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
            "messages": [
                {"role": "system", "content": system_message},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": max_tokens,
            "temperature": temperature,
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
            "Authorization": f"Bearer {settings.api_key}",
            "Content-Type": "application/json",
        }
        log_event(
            self._logger,
            "provider.request",
            LogContext(provider=self.provider_name, model=settings.model),
        )
        resp = await client.post(
            f"{self.base_url(settings)}/chat/completions", json=payload, headers=headers
        )
        resp.raise_for_status()
        return self.extract_text(resp.json())

    def extract_text(self, data: Any) -> Optional[str]:
        """Return ``choices[0].message.content`` trimmed, or ``None``."""
        try:
            return self._clean(data["choices"][0]["message"]["content"])
        except (KeyError, IndexError, TypeError):
            return None
