"""
OpenAI provider package.

Exports:
- OpenAIProvider: chat-completions adapter
"""

from .client import OpenAIProvider

__all__ = ["OpenAIProvider"]
