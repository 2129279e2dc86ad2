"""HTTP timeout configuration for provider calls.

``get_timeout_config()`` returns a process-cached :class:`TimeoutConfig`,
parsing ``CODE_FEEDBACK_HTTP_TIMEOUT_SECONDS`` on first use and again whenever
that variable changes (tests adjust it at runtime).
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from ..config.defaults import HTTP_TIMEOUT_SECONDS

HTTP_TIMEOUT_ENV = "CODE_FEEDBACK_HTTP_TIMEOUT_SECONDS"


@dataclass(frozen=True)
class TimeoutConfig:
    """Normalized timeout values (seconds)."""

    http_timeout_seconds: float = HTTP_TIMEOUT_SECONDS


_CACHED: Optional[TimeoutConfig] = None
_ENV_GUARD: Optional[str] = None


def _parse_env_float(name: str, default: float) -> float:
    """Read a positive float from the environment, else ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - module cache
    guard = os.getenv(HTTP_TIMEOUT_ENV, "")
    if _CACHED is None or guard != _ENV_GUARD:
        _CACHED = TimeoutConfig(
            http_timeout_seconds=_parse_env_float(HTTP_TIMEOUT_ENV, HTTP_TIMEOUT_SECONDS)
        )
        _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config", "HTTP_TIMEOUT_ENV"]
