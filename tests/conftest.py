from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from bizname_generator.common.config import Settings
from bizname_generator.pipeline.completion import CompletionClient


def _gemini_body(text: str) -> dict[str, Any]:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


class Recorder:
    """Mock transport handler that records requests and replays one response."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]) -> None:
        self.respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)


@pytest.fixture
def gemini_body() -> Callable[[str], dict[str, Any]]:
    """Build a generateContent success body wrapping `text`."""
    return _gemini_body


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key", model_id="gemini-test", base_url="https://gemini.test/v1beta", timeout=5.0)


@pytest.fixture
def make_client(settings: Settings) -> Callable[[Callable[[httpx.Request], httpx.Response]], tuple[CompletionClient, Recorder]]:
    def _make(respond: Callable[[httpx.Request], httpx.Response]) -> tuple[CompletionClient, Recorder]:
        recorder = Recorder(respond)
        return CompletionClient(settings, transport=httpx.MockTransport(recorder)), recorder

    return _make
