"""Google Gemini ``generateContent`` adapter.

Gemini has no separate system role in the request used here, so the system
message and the user prompt are folded into a single text part:
``"{system}\\n\\nUser: {prompt}"``. The API key travels as the ``key`` query
parameter.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from ..base.interfaces import CompletionProvider
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import ProviderKind, ProviderSettings
from ..config.defaults import COMPLETION_MAX_TOKENS, COMPLETION_TEMPERATURE, GEMINI_DEFAULT_BASE_URL

__all__ = ["GeminiProvider"]


class GeminiProvider(CompletionProvider):
    """Adapter for ``models/{model}:generateContent``."""

    kind = ProviderKind.GEMINI
    default_base_url = GEMINI_DEFAULT_BASE_URL

    def __init__(self) -> None:
        self._logger = get_logger("providers.gemini")

    def build_payload(
        self,
        prompt: str,
        system_message: str,
        *,
        max_tokens: int = COMPLETION_MAX_TOKENS,
        temperature: float = COMPLETION_TEMPERATURE,
    ) -> Dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": f"{system_message}\n\nUser: {prompt}"}]}],
            "generationConfig": {
                "maxOutputTokens": max_tokens,
                "temperature": temperature,
            },
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
            prompt, system_message, max_tokens=max_tokens, temperature=temperature
        )
        url = f"{self.base_url(settings)}/models/{settings.model}:generateContent"
        log_event(
            self._logger,
            "provider.request",
            LogContext(provider=self.provider_name, model=settings.model),
        )
        resp = await client.post(
            url,
            params={"key": settings.api_key or ""},
            json=payload,
            headers={"Content-Type": "application/json"},
        )
        resp.raise_for_status()
        return self.extract_text(resp.json())

    def extract_text(self, data: Any) -> Optional[str]:
        """Return ``candidates[0].content.parts[0].text`` trimmed, or ``None``."""
        try:
            return self._clean(data["candidates"][0]["content"]["parts"][0]["text"])
        except (KeyError, IndexError, TypeError):
            return None
