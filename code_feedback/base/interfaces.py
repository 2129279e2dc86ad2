"""Completion provider contract.

Adapters translate one prompt into one vendor REST call. They raise on
failure (``httpx.HTTPStatusError`` for non-2xx responses, ``httpx`` transport
errors, ``ValueError`` for undecodable bodies) and leave classification,
tracking and user notification to the gateway.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from ..config.defaults import COMPLETION_MAX_TOKENS, COMPLETION_TEMPERATURE, SYSTEM_MESSAGES
from .models import ProviderKind, ProviderSettings


class CompletionProvider(ABC):
    """Base class for provider adapters."""

    kind: ProviderKind
    default_base_url: str

    @property
    def provider_name(self) -> str:
        return self.kind.value

    def base_url(self, settings: ProviderSettings) -> str:
        return (settings.base_url or self.default_base_url).rstrip("/")

    def default_system_message(self, settings: ProviderSettings) -> str:
        return settings.system_message or SYSTEM_MESSAGES[self.kind.value]

    @abstractmethod
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
        """Send ``prompt`` and return the trimmed completion text.

        Returns ``None`` when the provider answered successfully but without
        any text.
        """

    @staticmethod
    def _clean(text: Any) -> Optional[str]:
        if not isinstance(text, str):
            return None
        return text.strip() or None


__all__ = ["CompletionProvider"]
