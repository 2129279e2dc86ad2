from __future__ import annotations

import socket
import types

import httpx
import pytest

from code_feedback.base.errors import (
    ClassifiedError,
    ErrorKind,
    classify_failure,
    parse_retry_after,
    provider_not_configured_error,
)


def _status_error(status: int, headers: dict | None = None) -> httpx.HTTPStatusError:
    request = httpx.Request("POST", "https://api.example.com/v1/chat")
    response = httpx.Response(status, headers=headers or {}, request=request)
    return httpx.HTTPStatusError("boom", request=request, response=response)


@pytest.mark.parametrize(
    "exc",
    [
        httpx.ConnectError("connection refused"),
        httpx.ReadTimeout("slow"),
        ConnectionResetError("reset"),
        TimeoutError("timed out"),
        socket.gaierror("name or service not known"),
    ],
)
def test_transport_failures_are_network(exc):
    err = classify_failure(exc, provider="openai")
    assert err.kind is ErrorKind.NETWORK
    assert err.can_retry is True
    assert err.status_code is None
    assert err.message == "No internet connection or AI service is unreachable"


@pytest.mark.parametrize(
    "status,kind,can_retry",
    [
        (401, ErrorKind.AUTHENTICATION, False),
        (402, ErrorKind.QUOTA_EXCEEDED, False),
        (429, ErrorKind.RATE_LIMIT, True),
        (500, ErrorKind.SERVICE_UNAVAILABLE, True),
        (502, ErrorKind.SERVICE_UNAVAILABLE, True),
        (503, ErrorKind.SERVICE_UNAVAILABLE, True),
    ],
)
def test_status_table(status, kind, can_retry):
    err = classify_failure(_status_error(status), provider="gemini")
    assert err.kind is kind
    assert err.status_code == status
    assert err.can_retry is can_retry
    assert err.provider == "gemini"


def test_messages_name_the_provider():
    assert (
        classify_failure(_status_error(401), provider="claude").message
        == "Invalid claude API key. Please check your configuration."
    )
    assert (
        classify_failure(_status_error(503), provider="openai").message
        == "openai service is temporarily unavailable. Please try again later."
    )


def test_missing_provider_reads_ai():
    err = classify_failure(_status_error(402))
    assert err.message == "AI API quota exceeded. Please check your billing and usage."


@pytest.mark.parametrize("status", [400, 403, 404, 418, 504])
def test_other_failing_statuses_are_unknown(status):
    err = classify_failure(_status_error(status), provider="openai")
    assert err.kind is ErrorKind.UNKNOWN
    assert err.status_code == status
    assert err.message == f"Unexpected error with openai: HTTP {status}"


def test_unknown_status_message_omits_request_url():
    request = httpx.Request(
        "POST",
        "https://generativelanguage.googleapis.com/v1beta/models/m:generateContent",
        params={"key": "AIzaSECRET123"},
    )
    response = httpx.Response(400, request=request)
    exc = httpx.HTTPStatusError(
        f"Client error '400 Bad Request' for url '{request.url}'", request=request, response=response
    )

    err = classify_failure(exc, provider="gemini")
    assert err.kind is ErrorKind.UNKNOWN
    assert err.message == "Unexpected error with gemini: HTTP 400"
    assert "AIzaSECRET123" not in str(err.to_dict())


def test_retry_after_header_is_used_for_429():
    err = classify_failure(_status_error(429, {"Retry-After": "5"}), provider="openai")
    assert err.retry_after_seconds == 5


@pytest.mark.parametrize("value", [None, "", "0", "-3", "abc", "1.5", "Wed, 21 Oct 2015 07:28:00 GMT", "٣"])
def test_parse_retry_after_falls_back_to_sixty(value):
    assert parse_retry_after(value) == 60


def test_parse_retry_after_accepts_padding():
    assert parse_retry_after(" 120 ") == 120


def test_explicit_response_wins_over_error():
    resp = types.SimpleNamespace(status_code=429, headers={"retry-after": "7"})
    err = classify_failure(RuntimeError("whatever"), response=resp, provider="openai")
    assert err.kind is ErrorKind.RATE_LIMIT
    assert err.retry_after_seconds == 7


def test_transport_error_with_http_response_uses_status():
    resp = types.SimpleNamespace(status_code=500, headers={})
    err = classify_failure(httpx.ConnectError("x"), response=resp)
    assert err.kind is ErrorKind.SERVICE_UNAVAILABLE


def test_successful_status_with_error_is_unknown():
    resp = types.SimpleNamespace(status_code=200, headers={})
    err = classify_failure(ValueError("bad json"), response=resp, provider="openai")
    assert err.kind is ErrorKind.UNKNOWN
    assert err.status_code is None
    assert err.message == "Unexpected error with openai: bad json"


def test_unknown_without_text_uses_placeholder():
    err = classify_failure(RuntimeError(), provider="gemini")
    assert err.message == "Unexpected error with gemini: Unknown error occurred"
    assert err.can_retry is True


def test_classification_never_raises_on_odd_inputs():
    assert classify_failure(None).kind is ErrorKind.UNKNOWN
    odd = types.SimpleNamespace(status_code="500", headers=None)
    assert classify_failure(Exception("x"), response=odd).kind is ErrorKind.UNKNOWN


def test_provider_not_configured_record():
    err = provider_not_configured_error("claude", "Selected AI provider is not properly configured")
    assert err.kind is ErrorKind.PROVIDER_NOT_CONFIGURED
    assert err.can_retry is False
    assert err.provider == "claude"


def test_to_dict_drops_empty_fields():
    err = ClassifiedError(kind=ErrorKind.NETWORK, message="m")
    assert err.to_dict() == {"kind": "network", "message": "m", "can_retry": True}
