from __future__ import annotations

import httpx
import pytest

from code_feedback.base.http import build_async_client
from code_feedback.base.timeouts import get_timeout_config


def test_default_timeout():
    assert get_timeout_config().http_timeout_seconds == 30.0


def test_env_timeout_and_cache_refresh(monkeypatch):
    monkeypatch.setenv("CODE_FEEDBACK_HTTP_TIMEOUT_SECONDS", "12.5")
    assert get_timeout_config().http_timeout_seconds == 12.5
    monkeypatch.setenv("CODE_FEEDBACK_HTTP_TIMEOUT_SECONDS", "-1")
    assert get_timeout_config().http_timeout_seconds == 30.0
    monkeypatch.setenv("CODE_FEEDBACK_HTTP_TIMEOUT_SECONDS", "soon")
    assert get_timeout_config().http_timeout_seconds == 30.0


@pytest.mark.asyncio
async def test_build_async_client_uses_configured_timeout(monkeypatch):
    monkeypatch.setenv("CODE_FEEDBACK_HTTP_TIMEOUT_SECONDS", "7")
    async with build_async_client() as client:
        assert client.timeout.read == 7.0


@pytest.mark.asyncio
async def test_build_async_client_with_transport():
    transport = httpx.MockTransport(lambda request: httpx.Response(204))
    async with build_async_client(timeout=1.0, transport=transport) as client:
        resp = await client.get("https://example.invalid/ping")
    assert resp.status_code == 204
