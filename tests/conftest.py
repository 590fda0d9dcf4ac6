"""Shared fixtures for the jobcraft tests.

No test talks to a real provider: operations receive a fake
``ProviderClient`` that records every request it is given, and the
provider tests patch ``requests.post`` or pass a mock OpenAI client.
"""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import List, Optional

import pytest

from jobcraft.providers import ProviderClient, ProviderRequest


class FakeProvider(ProviderClient):
    """Provider stub returning a canned completion or raising an error."""

    def __init__(self, completion: str = "<div>ok</div>", error: Optional[Exception] = None) -> None:
        self.completion = completion
        self.error = error
        self.requests: List[ProviderRequest] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_prompt(self) -> str:
        return self.requests[-1].messages[-1].content

    def complete(self, request: ProviderRequest) -> str:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.completion


class FakeResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, status_code: int, body: object = None, text: Optional[str] = None) -> None:
        self.status_code = status_code
        self._body = body
        self.text = text if text is not None else json.dumps(body)

    def json(self) -> object:
        if self._body is None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._body


def chat_completion(content: Optional[str]) -> SimpleNamespace:
    """Build an SDK style ChatCompletion with one choice."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def session() -> dict:
    return {"user": {"email": "jane@example.com"}}


@pytest.fixture(autouse=True)
def _no_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real credentials from the developer's shell out of the tests."""
    for name in ("PERPLEXITY_API_KEY", "OPENAI_API_KEY", "PERPLEXITY_API_URL", "JOBCRAFT_CONFIG"):
        monkeypatch.delenv(name, raising=False)
