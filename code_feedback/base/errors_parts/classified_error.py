"""
Structured classified error value.

A `ClassifiedError` is created fresh for every failed provider call and is
consumed immediately by the failure tracker and the notification dispatcher.
It is never mutated after creation.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .error_kind import ErrorKind


@dataclass(frozen=True)
class ClassifiedError:
    """Represents one classified provider failure.

    Attributes:
        kind: Normalized :class:`ErrorKind` for the failure.
        message: Human-readable description (may contain provider wording).
        provider: Provider key where the error originated (e.g. ``"openai"``).
        status_code: HTTP status when the failure came from an HTTP response.
        retry_after_seconds: Cool-down hint, only set for ``RATE_LIMIT``.
        can_retry: Whether calling again later can succeed without user action.
    """

    kind: ErrorKind
    message: str
    provider: Optional[str] = None
    status_code: Optional[int] = None
    retry_after_seconds: Optional[int] = None
    can_retry: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable mapping (``None`` fields dropped)."""
        data = {
            "kind": self.kind.value,
            "message": self.message,
            "provider": self.provider,
            "status_code": self.status_code,
            "retry_after_seconds": self.retry_after_seconds,
            "can_retry": self.can_retry,
        }
        return {k: v for k, v in data.items() if v is not None}

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.provider or '-'} {self.kind.value}: {self.message}"


__all__ = ["ClassifiedError"]
