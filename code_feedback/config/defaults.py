"""code_feedback.config.defaults
=============================

Central place for small, stable default values used across the
code_feedback package. These defaults can be overridden via environment
variables or external configuration, but provide sensible fallbacks for local
development and tests.

Module Purpose
--------------
- Provide a single import location for conservative default constants (no I/O).
- Keep the core free of magic literals.

This module intentionally avoids importing from other code_feedback modules to
prevent circular dependencies. Only plain constants should live here.
"""

from __future__ import annotations

# ---- Resilience ----

# Consecutive failures that open the breaker.
BREAKER_ERROR_THRESHOLD = 3
# Breaker open time before calls are allowed again (10 minutes).
BREAKER_COOLDOWN_SECONDS = 10 * 60
# Used when a 429 response carries no usable retry-after header.
DEFAULT_RETRY_AFTER_SECONDS = 60


# ---- Activity panel ----

# Most recent entries kept for the visual panel.
ACTIVITY_LOG_CAPACITY = 50


# ---- Completion parameters ----
COMPLETION_MAX_TOKENS = 150
COMPLETION_TEMPERATURE = 0.7
HTTP_TIMEOUT_SECONDS = 30.0


# ---- Provider-specific sane defaults ----
OPENAI_DEFAULT_MODEL = "gpt-3.5-turbo"
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"

GEMINI_DEFAULT_MODEL = "gemini-1.5-flash"
GEMINI_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

CLAUDE_DEFAULT_MODEL = "claude-3-5-haiku-20241022"
CLAUDE_DEFAULT_BASE_URL = "https://api.anthropic.com/v1"
CLAUDE_API_VERSION = "2023-06-01"

DEFAULT_PROVIDER = "openai"


# ---- Recovery destinations ----
API_KEY_URLS = {
    "openai": "https://platform.openai.com/api-keys",
    "gemini": "https://makersuite.google.com/app/apikey",
    "claude": "https://console.anthropic.com/dashboard",
}

BILLING_URLS = {
    "openai": "https://platform.openai.com/account/billing",
    "gemini": "https://console.cloud.google.com/billing",
    "claude": "https://console.anthropic.com/account/billing",
}

SETTINGS_ROOT = "codeFeedback"
API_KEY_SETTING_PATHS = {
    "openai": "codeFeedback.openai.apiKey",
    "gemini": "codeFeedback.gemini.apiKey",
    "claude": "codeFeedback.claude.apiKey",
}
# Configuration key written when the user turns AI features off.
AI_ENABLED_SETTING = "ai.enabled"


# ---- System messages ----
SYSTEM_MESSAGES = {
    "openai": (
        "You are an expert code mentor who provides brief, constructive feedback "
        "to help developers improve their coding skills. Always be encouraging and "
        "focus on learning opportunities.\n\n"
        "IMPORTANT: Respond in English with plain text only (no markdown formatting):\n"
        "- Keep responses under 150 characters\n"
        "- Use simple, clear language\n"
        "- Be encouraging and educational\n"
        "- No special formatting, bullet points, or code blocks"
    ),
    "gemini": (
        "You are a helpful programming assistant providing brief, constructive code "
        "feedback. Be encouraging and educational.\n\n"
        "IMPORTANT: Respond in English with plain text only:\n"
        "- Maximum 150 characters\n"
        "- Simple, clear language\n"
        "- Encouraging and educational tone\n"
        "- No markdown, formatting, or code blocks"
    ),
    "claude": (
        "You are a knowledgeable code mentor providing brief, helpful feedback to "
        "developers. Focus on being encouraging and educational.\n\n"
        "IMPORTANT: Respond in English with plain text only:\n"
        "- Keep under 150 characters\n"
        "- Use clear, simple language\n"
        "- Be encouraging and educational\n"
        "- No formatting, bullet points, or code blocks"
    ),
}


__all__ = [
    "BREAKER_ERROR_THRESHOLD",
    "BREAKER_COOLDOWN_SECONDS",
    "DEFAULT_RETRY_AFTER_SECONDS",
    "ACTIVITY_LOG_CAPACITY",
    "COMPLETION_MAX_TOKENS",
    "COMPLETION_TEMPERATURE",
    "HTTP_TIMEOUT_SECONDS",
    "OPENAI_DEFAULT_MODEL",
    "OPENAI_DEFAULT_BASE_URL",
    "GEMINI_DEFAULT_MODEL",
    "GEMINI_DEFAULT_BASE_URL",
    "CLAUDE_DEFAULT_MODEL",
    "CLAUDE_DEFAULT_BASE_URL",
    "CLAUDE_API_VERSION",
    "DEFAULT_PROVIDER",
    "API_KEY_URLS",
    "BILLING_URLS",
    "SETTINGS_ROOT",
    "API_KEY_SETTING_PATHS",
    "AI_ENABLED_SETTING",
    "SYSTEM_MESSAGES",
]
