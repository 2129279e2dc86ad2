"""Shared async HTTP client construction for provider adapters.

Purpose:
    Build ``httpx.AsyncClient`` instances with timeouts derived exclusively
    from :func:`get_timeout_config`, so adapters never hard-code numeric
    timeouts.

External dependencies:
    - ``httpx`` for the underlying asynchronous HTTP client.

Lifecycle & cleanup:
    - The gateway owns the client it builds and closes it in ``aclose()``.
      Clients are bound to the event loop that first uses them, so they are
      not pooled at module level.
"""

from __future__ import annotations

from typing import Optional

import httpx

from ..timeouts import get_timeout_config


def build_async_client(
    *,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Return a new ``httpx.AsyncClient`` for provider calls.

    Parameters:
        timeout: Overrides the configured HTTP timeout (seconds).
        transport: Optional transport (``httpx.MockTransport`` in tests).
    """
    seconds = timeout if timeout is not None else get_timeout_config().http_timeout_seconds
    if transport is not None:
        return httpx.AsyncClient(timeout=seconds, transport=transport)
    return httpx.AsyncClient(timeout=seconds)


__all__ = ["build_async_client"]
