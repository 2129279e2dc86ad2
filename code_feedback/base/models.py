"""Provider-agnostic configuration models.

Purpose
-------
Typed, validated configuration objects consumed by the gateway and the
provider adapters. Construction from raw mappings happens in
:mod:`code_feedback.config`; these models only validate and answer simple
questions (which settings are active, is the provider configured).

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and `.model_copy()` convenience.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from ..config.defaults import (
    CLAUDE_DEFAULT_MODEL,
    COMPLETION_MAX_TOKENS,
    COMPLETION_TEMPERATURE,
    GEMINI_DEFAULT_MODEL,
    OPENAI_DEFAULT_MODEL,
)


class ProviderKind(str, Enum):
    """Supported completion backends."""

    OPENAI = "openai"
    GEMINI = "gemini"
    CLAUDE = "claude"


class ProviderSettings(BaseModel):
    """Credentials and model selection for a single provider.

    Attributes
    ----------
    api_key:
        API key string. Blank or missing means the provider is not configured.
    model:
        Model identifier sent with each request.
    base_url:
        Optional override for the API base URL (proxies, self-hosted gateways).
    system_message:
        Optional override of the default system prompt for this provider.
    """

    api_key: Optional[str] = None
    model: str
    base_url: Optional[str] = None
    system_message: Optional[str] = None

    def is_configured(self) -> bool:
        return bool(self.api_key and self.api_key.strip())


class AIConfig(BaseModel):
    """Top-level AI feature configuration."""

    enabled: bool = True
    provider: ProviderKind = ProviderKind.OPENAI
    openai: ProviderSettings = Field(
        default_factory=lambda: ProviderSettings(model=OPENAI_DEFAULT_MODEL)
    )
    gemini: ProviderSettings = Field(
        default_factory=lambda: ProviderSettings(model=GEMINI_DEFAULT_MODEL)
    )
    claude: ProviderSettings = Field(
        default_factory=lambda: ProviderSettings(model=CLAUDE_DEFAULT_MODEL)
    )
    max_tokens: int = Field(COMPLETION_MAX_TOKENS, gt=0)
    temperature: float = Field(COMPLETION_TEMPERATURE, ge=0.0, le=2.0)

    def settings_for(self, kind: ProviderKind) -> ProviderSettings:
        return getattr(self, ProviderKind(kind).value)

    @property
    def active_settings(self) -> ProviderSettings:
        return self.settings_for(self.provider)

    def is_provider_configured(self) -> bool:
        """Return True when the selected provider has a usable API key."""
        return self.active_settings.is_configured()


__all__ = ["ProviderKind", "ProviderSettings", "AIConfig"]
