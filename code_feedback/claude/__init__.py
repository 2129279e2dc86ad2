"""
Claude provider package.

Exports:
- ClaudeProvider: Anthropic messages adapter
"""

from .client import ClaudeProvider

__all__ = ["ClaudeProvider"]
