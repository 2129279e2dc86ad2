"""User-facing message table.

English defaults for every string the dispatcher and runtime show. Hosts that
localize pass their own :class:`NotificationMessages`; only the named
placeholders ``{minutes}`` and ``{provider}`` are filled in here.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from ..errors import ErrorKind


@dataclass(frozen=True)
class NotificationMessages:
    # Simplified one-line panel messages, one per error kind.
    invalid_api_key: str = "Invalid API key - Please check settings"
    rate_limit_reached: str = "Rate limit reached - Will retry automatically"
    quota_exceeded: str = "API quota exceeded - Check billing"
    connection_issue: str = "Connection issue - Retrying..."
    service_unavailable: str = "AI service unavailable - Retrying..."
    provider_config_missing: str = "Selected AI provider is not properly configured"
    ai_unavailable: str = "AI temporarily unavailable"
    too_many_errors: str = (
        "AI features paused due to repeated errors. Will retry automatically in 10 minutes."
    )

    # Toasts and prompts.
    api_key_setup_title: str = "🤖 AI Code Feedback: AI provider API key required for AI features."
    too_many_errors_warning: str = (
        "⚠️ AI Code Feedback: Too many consecutive errors. "
        "AI features temporarily disabled for 10 minutes."
    )
    rate_limit_warning: str = (
        "⏱️ AI Code Feedback: Rate limit reached. "
        "AI features will resume in approximately {minutes} minute(s)."
    )
    quota_exceeded_error: str = "💳 AI Code Feedback: AI API quota exceeded. Please check your billing."
    network_warning: str = "🌐 AI Code Feedback: Network connection issue. Will retry automatically."
    service_unavailable_warning: str = (
        "🔧 AI Code Feedback: AI service temporarily unavailable. Will retry automatically."
    )
    unknown_error: str = "❌ AI Code Feedback: {message}"
    ai_re_enabled: str = "✅ AI Code Feedback: AI analysis has been re-enabled."
    provider_changed: str = "🔄 AI Provider changed to {provider}. AI features ready!"

    # Panel lines for recovery and user actions.
    error_prefix: str = "❌ "
    re_enabled_log: str = "✅ AI features re-enabled and ready!"
    rate_limit_passed_log: str = "✅ Rate limit period passed - AI ready!"
    disabled_by_user_log: str = "AI features disabled by user"
    disabled_quota_log: str = "AI features disabled due to quota issues"
    provider_configured_log: str = "✅ AI provider configured - AI features re-enabled!"
    api_key_updated_log: str = "✅ API key updated - AI features re-enabled!"

    # Action labels.
    open_settings: str = "Open Settings"
    get_api_key: str = "Get API Key"
    disable_ai: str = "Disable AI Features"
    check_billing: str = "Check Billing"
    get_provider_key: Dict[str, str] = field(
        default_factory=lambda: {
            "openai": "Get OpenAI Key",
            "gemini": "Get Gemini Key",
            "claude": "Get Claude Key",
        }
    )
    provider_names: Dict[str, str] = field(
        default_factory=lambda: {
            "openai": "OpenAI",
            "gemini": "Google Gemini",
            "claude": "Anthropic Claude",
        }
    )

    def simplified(self, kind: ErrorKind) -> str:
        """Return the jargon-free panel line for an error kind."""
        table = {
            ErrorKind.AUTHENTICATION: self.invalid_api_key,
            ErrorKind.RATE_LIMIT: self.rate_limit_reached,
            ErrorKind.QUOTA_EXCEEDED: self.quota_exceeded,
            ErrorKind.NETWORK: self.connection_issue,
            ErrorKind.SERVICE_UNAVAILABLE: self.service_unavailable,
            ErrorKind.PROVIDER_NOT_CONFIGURED: self.provider_config_missing,
        }
        return table.get(kind, self.ai_unavailable)

    def provider_name(self, provider: Optional[str]) -> str:
        if not provider:
            return "AI"
        return self.provider_names.get(provider, provider)

    def get_key_label(self, provider: Optional[str]) -> str:
        return self.get_provider_key.get(provider or "", self.get_api_key)


DEFAULT_MESSAGES = NotificationMessages()


__all__ = ["NotificationMessages", "DEFAULT_MESSAGES"]
