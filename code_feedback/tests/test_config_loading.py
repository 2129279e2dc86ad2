"""Merge order and validation of get_ai_config()."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from code_feedback.base.models import AIConfig, ProviderKind
from code_feedback.config import get_ai_config


def test_defaults():
    cfg = get_ai_config()
    assert isinstance(cfg, AIConfig)
    assert cfg.enabled is True
    assert cfg.provider is ProviderKind.OPENAI
    assert cfg.openai.model == "gpt-3.5-turbo"
    assert cfg.gemini.model == "gemini-1.5-flash"
    assert cfg.claude.model == "claude-3-5-haiku-20241022"
    assert cfg.max_tokens == 150
    assert cfg.temperature == 0.7
    assert cfg.is_provider_configured() is False


def test_env_overrides_defaults(monkeypatch):
    monkeypatch.setenv("CODE_FEEDBACK_PROVIDER", "Gemini")
    monkeypatch.setenv("GOOGLE_API_KEY", "g-key")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-1.5-pro")
    monkeypatch.setenv("CODE_FEEDBACK_ENABLED", "false")

    cfg = get_ai_config()
    assert cfg.provider is ProviderKind.GEMINI
    assert cfg.active_settings.api_key == "g-key"
    assert cfg.active_settings.model == "gemini-1.5-pro"
    assert cfg.enabled is False


def test_file_then_env_then_overrides(monkeypatch, tmp_path):
    path = tmp_path / "ai.json"
    path.write_text(
        json.dumps(
            {
                "provider": "claude",
                "claude": {"api_key": "from-file", "model": "claude-file"},
                "temperature": 0.3,
            }
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("CODE_FEEDBACK_CONFIG_FILE", str(path))
    monkeypatch.setenv("ANTHROPIC_API_KEY", "from-env")

    cfg = get_ai_config({"claude": {"model": "claude-override", "api_key": None}})
    assert cfg.provider is ProviderKind.CLAUDE
    assert cfg.claude.api_key == "from-env"
    assert cfg.claude.model == "claude-override"
    assert cfg.temperature == 0.3


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_invalid_file_is_ignored(monkeypatch, tmp_path, content):
    path = tmp_path / "broken.json"
    path.write_text(content, encoding="utf-8")
    monkeypatch.setenv("CODE_FEEDBACK_CONFIG_FILE", str(path))
    assert get_ai_config().provider is ProviderKind.OPENAI


def test_missing_file_is_ignored(monkeypatch, tmp_path):
    monkeypatch.setenv("CODE_FEEDBACK_CONFIG_FILE", str(tmp_path / "absent.json"))
    assert get_ai_config().enabled is True


def test_invalid_override_raises():
    with pytest.raises(ValidationError):
        get_ai_config({"max_tokens": 0})


def test_blank_key_is_not_configured():
    cfg = get_ai_config({"openai": {"api_key": "   "}})
    assert cfg.is_provider_configured() is False
    cfg = get_ai_config({"openai": {"api_key": "sk-1"}})
    assert cfg.is_provider_configured() is True


def test_yaml_file_is_accepted(monkeypatch, tmp_path):
    path = tmp_path / "ai.yaml"
    path.write_text(
        "provider: gemini\n"
        "gemini:\n"
        "  api_key: g-yaml\n"
        "max_tokens: 200\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("CODE_FEEDBACK_CONFIG_FILE", str(path))
    cfg = get_ai_config()
    assert cfg.provider is ProviderKind.GEMINI
    assert cfg.gemini.api_key == "g-yaml"
    assert cfg.gemini.model == "gemini-1.5-flash"
    assert cfg.max_tokens == 200


def test_placeholder_env_key_is_ignored(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "changeme")
    cfg = get_ai_config()
    assert cfg.openai.api_key is None
    assert cfg.is_provider_configured() is False
