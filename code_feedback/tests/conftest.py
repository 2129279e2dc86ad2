"""Shared fixtures for the code_feedback test suite.

Provides in-memory stand-ins for the host notification surface and the
configuration writer, a virtual-time scheduler, a scripted ``httpx``
transport, and an autouse fixture that clears provider environment variables
so host credentials never leak into assertions.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple, Union

import httpx
import pytest

from code_feedback.base.models import AIConfig, ProviderSettings
from code_feedback.base.notifications import NotificationLevel
from code_feedback.base.scheduling import VirtualScheduler

_ENV_VARS = (
    "OPENAI_API_KEY",
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "ANTHROPIC_API_KEY",
    "CLAUDE_API_KEY",
    "OPENAI_MODEL",
    "GEMINI_MODEL",
    "CLAUDE_MODEL",
    "CODE_FEEDBACK_ENABLED",
    "CODE_FEEDBACK_PROVIDER",
    "CODE_FEEDBACK_CONFIG_FILE",
    "CODE_FEEDBACK_HTTP_TIMEOUT_SECONDS",
)


class FakeSurface:
    """Records every notification; prompts resolve to queued answers."""

    def __init__(self) -> None:
        self.notifications: List[Tuple[NotificationLevel, str]] = []
        self.prompts: List[Tuple[NotificationLevel, str, List[str]]] = []
        self.opened_urls: List[str] = []
        self.opened_settings: List[str] = []
        self.answers: List[Optional[str]] = []

    def notify(self, level: NotificationLevel, message: str) -> None:
        self.notifications.append((level, message))

    async def prompt(
        self, level: NotificationLevel, message: str, actions: Sequence[str]
    ) -> Optional[str]:
        self.prompts.append((level, message, list(actions)))
        return self.answers.pop(0) if self.answers else None

    def open_url(self, url: str) -> None:
        self.opened_urls.append(url)

    def open_settings(self, setting_path: str) -> None:
        self.opened_settings.append(setting_path)

    def messages(self, level: Optional[NotificationLevel] = None) -> List[str]:
        return [m for lvl, m in self.notifications if level is None or lvl is level]


class FakeConfigWriter:
    def __init__(self) -> None:
        self.writes: List[Tuple[str, Any]] = []

    def update(self, key: str, value: Any) -> None:
        self.writes.append((key, value))


Step = Union[Exception, Tuple[int, Any], Tuple[int, Any, dict]]


class ScriptedTransport:
    """``httpx.MockTransport`` handler replaying scripted steps.

    Each step is ``(status, json_body)``, ``(status, json_body, headers)`` or
    an exception to raise. The last step repeats once the script runs out.
    """

    def __init__(self, *steps: Step) -> None:
        self.steps = list(steps)
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        step = self.steps.pop(0) if len(self.steps) > 1 else self.steps[0]
        if isinstance(step, Exception):
            raise step
        status, body, *rest = step
        headers = rest[0] if rest else {}
        return httpx.Response(status, json=body, headers=headers)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


def openai_reply(text: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": text}}]}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture()
def config_writer() -> FakeConfigWriter:
    return FakeConfigWriter()


@pytest.fixture()
def vsched() -> VirtualScheduler:
    return VirtualScheduler()


@pytest.fixture()
def scripted():
    """Return the :class:`ScriptedTransport` class for building scripts."""
    return ScriptedTransport


@pytest.fixture()
def reply():
    return openai_reply


@pytest.fixture()
def openai_config() -> AIConfig:
    return AIConfig(
        provider="openai",
        openai=ProviderSettings(api_key="sk-live", model="gpt-3.5-turbo"),
    )
