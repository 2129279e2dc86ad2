"""
Failure classification mapping raw failures to :class:`ClassifiedError`.

Implements transport-failure detection, HTTP status extraction and the
status-to-kind table. Classification is a pure function of its inputs and
never raises: anything unrecognized degrades to ``UNKNOWN``.
"""
from __future__ import annotations

import socket
from typing import Any, Dict, Mapping, Optional

import httpx

from ...config.defaults import DEFAULT_RETRY_AFTER_SECONDS
from .classified_error import ClassifiedError
from .error_kind import NON_RETRYABLE_KINDS, ErrorKind

_TRANSPORT_ERRORS = (
    httpx.TransportError,
    ConnectionError,
    TimeoutError,
    socket.gaierror,
)

_HTTP_STATUS_MAP: Dict[int, ErrorKind] = {
    401: ErrorKind.AUTHENTICATION,
    402: ErrorKind.QUOTA_EXCEEDED,
    429: ErrorKind.RATE_LIMIT,
    500: ErrorKind.SERVICE_UNAVAILABLE,
    502: ErrorKind.SERVICE_UNAVAILABLE,
    503: ErrorKind.SERVICE_UNAVAILABLE,
}

_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.AUTHENTICATION: "Invalid {provider} API key. Please check your configuration.",
    ErrorKind.RATE_LIMIT: "{provider} API rate limit exceeded. Please wait before trying again.",
    ErrorKind.QUOTA_EXCEEDED: "{provider} API quota exceeded. Please check your billing and usage.",
    ErrorKind.SERVICE_UNAVAILABLE: "{provider} service is temporarily unavailable. Please try again later.",
}

NETWORK_MESSAGE = "No internet connection or AI service is unreachable"
UNKNOWN_ERROR_TEXT = "Unknown error occurred"


def _extract_response(error: Optional[BaseException], response: Any) -> Any:
    """Return the HTTP response for a failure, if one is available.

    The explicit ``response`` argument wins; otherwise ``error.response`` is
    used (``httpx.HTTPStatusError`` carries one).
    """
    if response is not None:
        return response
    if error is None:
        return None
    try:
        return getattr(error, "response", None)
    except Exception:  # httpx raises RuntimeError for unset request/response
        return None


def _extract_status(response: Any) -> Optional[int]:
    """Return a valid integer HTTP status from a response-like object."""
    if response is None:
        return None
    status = getattr(response, "status_code", None)
    if isinstance(status, int) and not isinstance(status, bool) and 100 <= status < 600:
        return status
    return None


def _header(response: Any, name: str) -> Optional[str]:
    """Case-insensitive header lookup tolerant of plain mappings."""
    headers = getattr(response, "headers", None)
    if not headers:
        return None
    try:
        value = headers.get(name)
        if value is None and isinstance(headers, Mapping):
            lowered = name.lower()
            value = next(
                (v for k, v in headers.items() if str(k).lower() == lowered),
                None,
            )
    except Exception:
        return None
    return value if isinstance(value, str) else None


def parse_retry_after(value: Optional[str]) -> int:
    """Parse a ``retry-after`` header as positive whole seconds.

    HTTP-date values, negative numbers, zero, and garbage all fall back to
    ``DEFAULT_RETRY_AFTER_SECONDS``.
    """
    if value is None:
        return DEFAULT_RETRY_AFTER_SECONDS
    text = value.strip()
    if not (text.isascii() and text.isdigit()):
        return DEFAULT_RETRY_AFTER_SECONDS
    seconds = int(text)
    return seconds if seconds > 0 else DEFAULT_RETRY_AFTER_SECONDS


def _error_text(error: Optional[BaseException]) -> str:
    if error is None:
        return ""
    try:
        return str(error).strip()
    except Exception:
        return ""


def _provider_label(provider: Optional[str]) -> str:
    return provider or "AI"


def classify_failure(
    error: Optional[BaseException],
    response: Any = None,
    provider: Optional[str] = None,
) -> ClassifiedError:
    """Classify a failed provider call into a :class:`ClassifiedError`.

    Precedence (first match wins):
        1. Transport failure without an HTTP response -> ``NETWORK``.
        2. Failing HTTP status found in the status table.
        3. ``UNKNOWN`` fallback: ``HTTP <status>`` for other failing statuses,
           otherwise the error's own text.
    """
    resp = _extract_response(error, response)
    status = _extract_status(resp)

    if status is None and isinstance(error, _TRANSPORT_ERRORS):
        return ClassifiedError(
            kind=ErrorKind.NETWORK,
            message=NETWORK_MESSAGE,
            provider=provider,
            can_retry=True,
        )

    if status is not None and not 200 <= status < 300:
        kind = _HTTP_STATUS_MAP.get(status)
        if kind is not None:
            retry_after = None
            if kind is ErrorKind.RATE_LIMIT:
                retry_after = parse_retry_after(_header(resp, "retry-after"))
            return ClassifiedError(
                kind=kind,
                message=_MESSAGES[kind].format(provider=_provider_label(provider)),
                provider=provider,
                status_code=status,
                retry_after_seconds=retry_after,
                can_retry=kind not in NON_RETRYABLE_KINDS,
            )

    failing_status = status if status is not None and not 200 <= status < 300 else None
    # httpx status errors embed the request URL, which may carry the API key.
    if failing_status is not None:
        detail = f"HTTP {failing_status}"
    else:
        detail = _error_text(error) or UNKNOWN_ERROR_TEXT
    return ClassifiedError(
        kind=ErrorKind.UNKNOWN,
        message=f"Unexpected error with {_provider_label(provider)}: {detail}",
        provider=provider,
        status_code=failing_status,
        can_retry=True,
    )


def provider_not_configured_error(provider: Optional[str], message: str) -> ClassifiedError:
    """Build the record used when the selected provider has no credentials."""
    return ClassifiedError(
        kind=ErrorKind.PROVIDER_NOT_CONFIGURED,
        message=message,
        provider=provider,
        can_retry=False,
    )


__all__ = [
    "classify_failure",
    "parse_retry_after",
    "provider_not_configured_error",
    "NETWORK_MESSAGE",
    "UNKNOWN_ERROR_TEXT",
    "_HTTP_STATUS_MAP",
]
