"""
Gemini provider package.

Exports:
- GeminiProvider: generateContent adapter
"""

from .client import GeminiProvider

__all__ = ["GeminiProvider"]
