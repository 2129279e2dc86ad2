"""Provider Factory utilities.

Purpose
-------
Resolve a :class:`ProviderKind` to a concrete :class:`CompletionProvider`.
Adapters are imported lazily using ``importlib`` so the core layer never
imports adapter modules at import time.

Failure modes
-------------
The factory performs no retries or fallbacks; it either returns an instance
or raises :class:`UnknownProviderError`.
"""

from __future__ import annotations

from importlib import import_module
from typing import Dict, Tuple, Type, Union

from .interfaces import CompletionProvider
from .models import ProviderKind


class UnknownProviderError(Exception):
    """Raised when a provider cannot be resolved or initialized.

    Failure modes include:
    - The provider name is not registered in the factory mapping.
    - The provider module cannot be imported or the adapter class is missing.
    - The adapter constructor raised an exception during initialization.
    """


class ProviderFactory:
    """Create provider adapters from a :class:`ProviderKind` or its name."""

    # Map canonical provider names to import paths and class names
    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "openai": {"module": "code_feedback.openai.client", "class": "OpenAIProvider"},
        "gemini": {"module": "code_feedback.gemini.client", "class": "GeminiProvider"},
        "claude": {"module": "code_feedback.claude.client", "class": "ClaudeProvider"},
    }

    @classmethod
    def create(cls, provider: Union[ProviderKind, str]) -> CompletionProvider:
        """Create a provider adapter instance.

        Raises
        ------
        UnknownProviderError
            If provider is unknown, the adapter module fails to import, the
            adapter class is missing, or the adapter constructor raises.
        """
        name = provider.value if isinstance(provider, ProviderKind) else (provider or "").lower().strip()
        spec = cls._PROVIDERS.get(name)
        if not spec:
            raise UnknownProviderError(f"Unknown provider '{provider}'")

        module_path, class_name = spec["module"], spec["class"]
        try:
            mod = import_module(module_path)
        except Exception as exc:  # pragma: no cover - import failure path
            raise UnknownProviderError(
                f"Failed to import module '{module_path}' for provider '{name}': {exc}"
            ) from exc

        try:
            klass: Type[CompletionProvider] = getattr(mod, class_name)
        except AttributeError as exc:
            raise UnknownProviderError(
                f"Adapter class '{class_name}' not found in '{module_path}' for provider '{name}'"
            ) from exc

        try:
            return klass()
        except Exception as exc:  # pragma: no cover - adapter runtime init error
            raise UnknownProviderError(f"Failed to initialize provider '{name}': {exc}") from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported canonical provider names in deterministic order."""
        return tuple(cls._PROVIDERS.keys())


def create_provider(provider: Union[ProviderKind, str]) -> CompletionProvider:
    """Shorthand for :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider)


__all__ = ["ProviderFactory", "UnknownProviderError", "create_provider"]
