"""Unified configuration layer for AI feedback.

Goals
-----
* Centralize defaults (provider, models, base URLs).
* Merge sources in a predictable order:
    1. Built-in defaults
    2. Optional external JSON or YAML file pointed to by CODE_FEEDBACK_CONFIG_FILE
    3. Environment variables (e.g. OPENAI_MODEL, OPENAI_API_KEY)
    4. In-code overrides passed to the helper
* Provide a single call site: ``get_ai_config(overrides)``.

Environment Variable Conventions
--------------------------------
CODE_FEEDBACK_ENABLED, CODE_FEEDBACK_PROVIDER, <PROVIDER>_MODEL and the API
key variables listed in :mod:`code_feedback.config.env`.

External Config File (Optional)
-------------------------------
```
{
  "enabled": true,
  "provider": "gemini",
  "gemini": {"model": "gemini-1.5-flash", "api_key": "..."}
}
```

Public API
----------
* get_ai_config(overrides: dict | None = None) -> AIConfig
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    CLAUDE_DEFAULT_MODEL,
    DEFAULT_PROVIDER,
    GEMINI_DEFAULT_MODEL,
    OPENAI_DEFAULT_MODEL,
)
from .env import (
    CONFIG_FILE_ENV,
    ENABLED_ENV,
    MODEL_ENV_MAP,
    PROVIDER_ENV,
    is_placeholder,
    parse_bool,
    resolve_provider_key,
)

logger = logging.getLogger(__name__)

PROVIDER_SECTIONS = ("openai", "gemini", "claude")

DEFAULTS: Dict[str, Any] = {
    "enabled": True,
    "provider": DEFAULT_PROVIDER,
    "openai": {"model": OPENAI_DEFAULT_MODEL},
    "gemini": {"model": GEMINI_DEFAULT_MODEL},
    "claude": {"model": CLAUDE_DEFAULT_MODEL},
}


def _load_external_config() -> Dict[str, Any]:
    """Read the optional JSON or YAML config file; invalid content yields ``{}``."""
    path = os.getenv(CONFIG_FILE_ENV)
    if not path:
        return {}
    p = Path(path)
    if not p.is_file():
        logger.warning("config file %s not found; ignoring", path)
        return {}
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("config file %s unreadable (%s); ignoring", path, exc)
        return {}
    # Try JSON first
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            logger.warning("config file %s is neither JSON nor YAML (%s); ignoring", path, exc)
            return {}
    if not isinstance(data, dict):
        logger.warning("config file %s is not a mapping; ignoring", path)
        return {}
    return data


def _merge(base: Dict[str, Any], extra: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``extra`` into ``base`` one level deep for provider sections."""
    out = dict(base)
    for key, value in extra.items():
        if value is None:
            continue
        if key in PROVIDER_SECTIONS and isinstance(value, dict):
            section = dict(out.get(key) or {})
            section |= {k: v for k, v in value.items() if v is not None}
            out[key] = section
        else:
            out[key] = value
    return out


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    enabled = parse_bool(os.getenv(ENABLED_ENV))
    if enabled is not None:
        out["enabled"] = enabled
    if provider := os.getenv(PROVIDER_ENV):
        out["provider"] = provider.strip().lower()
    for name in PROVIDER_SECTIONS:
        section: Dict[str, Any] = {}
        key, used = resolve_provider_key(name)
        if key and is_placeholder(key):
            logger.warning("ignoring placeholder value in %s", used)
        elif key:
            section["api_key"] = key
        if model := os.getenv(MODEL_ENV_MAP[name]):
            section["model"] = model
        if section:
            out[name] = section
    return out


def get_ai_config(overrides: Optional[Dict[str, Any]] = None):
    """Return the merged, validated :class:`AIConfig`.

    Merge order (later wins): defaults -> external file -> env vars -> overrides.

    Raises
    ------
    pydantic.ValidationError
        When the merged values do not validate (e.g. unknown provider).
    """
    from ..base.models import AIConfig

    cfg = _merge(DEFAULTS, _load_external_config())
    cfg = _merge(cfg, _env_overrides())
    if overrides:
        cfg = _merge(cfg, overrides)
    return AIConfig.model_validate(cfg)


__all__ = ["get_ai_config", "DEFAULTS", "PROVIDER_SECTIONS"]
