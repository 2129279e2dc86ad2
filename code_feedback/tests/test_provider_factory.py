from __future__ import annotations

import pytest

from code_feedback.base.factory import ProviderFactory, UnknownProviderError, create_provider
from code_feedback.base.interfaces import CompletionProvider
from code_feedback.base.models import ProviderKind


def test_supported_order():
    assert ProviderFactory.supported() == ("openai", "gemini", "claude")


@pytest.mark.parametrize("kind", list(ProviderKind))
def test_create_each_kind(kind):
    provider = ProviderFactory.create(kind)
    assert isinstance(provider, CompletionProvider)
    assert provider.kind is kind
    assert provider.provider_name == kind.value


def test_create_accepts_names_case_insensitively():
    assert create_provider(" Gemini ").kind is ProviderKind.GEMINI


def test_unknown_provider_raises():
    with pytest.raises(UnknownProviderError):
        ProviderFactory.create("anthropic")
