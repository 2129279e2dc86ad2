"""HTTP utilities package for providers.

Exposes the async client builder.
"""

from .client import build_async_client

__all__ = ["build_async_client"]
