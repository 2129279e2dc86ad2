"""code_feedback.config.env
========================

Centralized environment variable mapping and helpers for provider credentials.

Purpose
-------
- Provide a single source of truth for mapping provider identifiers to their
  corresponding environment variable names (canonical and aliases).
- Offer small utilities to look up provider API keys in a consistent way.

Design Notes
------------
- Canonical mapping is defined in ``ENV_MAP``. Providers that accept more
  than one variable list them in ``ENV_ALIASES`` with the canonical name first.
- Helpers never raise on unknown providers or unset variables; callers decide
  how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

# Canonical provider -> env var mapping
ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "gemini": "GEMINI_API_KEY",
    "claude": "ANTHROPIC_API_KEY",
}

# Provider -> ordered tuple of acceptable env var names (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    "claude": ("ANTHROPIC_API_KEY", "CLAUDE_API_KEY"),
}

# Model override variables, e.g. OPENAI_MODEL.
MODEL_ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_MODEL",
    "gemini": "GEMINI_MODEL",
    "claude": "CLAUDE_MODEL",
}

ENABLED_ENV = "CODE_FEEDBACK_ENABLED"
PROVIDER_ENV = "CODE_FEEDBACK_PROVIDER"
CONFIG_FILE_ENV = "CODE_FEEDBACK_CONFIG_FILE"

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and resilient to surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def get_env_var_name(provider: str) -> Optional[str]:
    """Return the canonical environment variable name for a provider."""
    return ENV_MAP.get(provider.lower()) if provider else None


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield acceptable environment variable names for a provider.

    The canonical name is yielded first, followed by any aliases.
    """
    p = (provider or "").lower()
    canonical = ENV_MAP.get(p)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve an API key for a provider from the process environment.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        (value, env_var_used) for the first non-empty candidate, or
        (None, None) when nothing is set.
    """
    for name in get_env_var_candidates(provider):
        if val := os.environ.get(name):
            return val, name
    return None, None


def parse_bool(value: Optional[str]) -> Optional[bool]:
    """Parse a boolean-ish environment value; ``None`` when unrecognized."""
    if value is None:
        return None
    v = value.strip().lower()
    if v in _TRUE_VALUES:
        return True
    if v in _FALSE_VALUES:
        return False
    return None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "MODEL_ENV_MAP",
    "ENABLED_ENV",
    "PROVIDER_ENV",
    "CONFIG_FILE_ENV",
    "is_placeholder",
    "get_env_var_name",
    "get_env_var_candidates",
    "resolve_provider_key",
    "parse_bool",
]
