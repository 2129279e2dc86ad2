"""
Normalized failure kinds (taxonomy).

Defines the `ErrorKind` enumeration produced by the classifier. Values are
lowercase snake_case and are considered a stable public contract for logging
and user-facing routing.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Enumerated failure categories for a provider call."""

    AUTHENTICATION = "authentication"
    RATE_LIMIT = "rate_limit"
    NETWORK = "network"
    SERVICE_UNAVAILABLE = "service_unavailable"
    QUOTA_EXCEEDED = "quota_exceeded"
    PROVIDER_NOT_CONFIGURED = "provider_not_configured"
    UNKNOWN = "unknown"


# Kinds that will not go away by simply calling again; the user has to fix
# credentials or billing first.
NON_RETRYABLE_KINDS = frozenset(
    {
        ErrorKind.AUTHENTICATION,
        ErrorKind.QUOTA_EXCEEDED,
        ErrorKind.PROVIDER_NOT_CONFIGURED,
    }
)


__all__ = ["ErrorKind", "NON_RETRYABLE_KINDS"]
