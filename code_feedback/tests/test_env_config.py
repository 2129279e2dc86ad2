from __future__ import annotations

from code_feedback.config.env import (
    ENV_ALIASES,
    ENV_MAP,
    get_env_var_candidates,
    get_env_var_name,
    is_placeholder,
    parse_bool,
    resolve_provider_key,
)


def test_env_map_contains_expected_keys():
    for p in ["openai", "gemini", "claude"]:
        assert p in ENV_MAP


def test_get_env_var_name_and_aliases():
    assert get_env_var_name("openai") == "OPENAI_API_KEY"
    assert get_env_var_name("Claude") == "ANTHROPIC_API_KEY"
    assert get_env_var_name("") is None
    assert ENV_ALIASES["gemini"][0] == "GEMINI_API_KEY"
    assert list(get_env_var_candidates("gemini")) == ["GEMINI_API_KEY", "GOOGLE_API_KEY"]


def test_is_placeholder_heuristics():
    assert is_placeholder("placeholder-value")
    assert is_placeholder("ChangeMe123")
    assert is_placeholder("example-key")
    assert is_placeholder("test_token")
    assert not is_placeholder("real-value")
    assert not is_placeholder(None)


def test_resolve_prefers_canonical(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "alias")
    assert resolve_provider_key("gemini") == ("alias", "GOOGLE_API_KEY")
    monkeypatch.setenv("GEMINI_API_KEY", "canonical")
    assert resolve_provider_key("gemini") == ("canonical", "GEMINI_API_KEY")


def test_resolve_missing_returns_none():
    assert resolve_provider_key("claude") == (None, None)


def test_parse_bool():
    assert parse_bool("Yes") is True
    assert parse_bool(" off ") is False
    assert parse_bool("maybe") is None
    assert parse_bool(None) is None
