"""Tests for the four public operations.

The operations are exercised with a fake provider injected through the
``client`` argument, except for the analyze_job HTTP scenarios which run
the real :class:`DirectHttpProvider` against a patched ``requests.post``.
"""

from __future__ import annotations

import dataclasses
import json
import logging

import pytest
import requests

from jobcraft import (
    ExtractionError,
    OperationError,
    ProviderError,
    Unauthorized,
    analyze_fit_for_job,
    analyze_job,
    generate_cover_letter,
    generate_resume,
)
from jobcraft.config import Settings
from jobcraft.providers import DirectHttpProvider

from conftest import FakeProvider, FakeResponse

OPERATIONS = {
    "analyze_job": lambda session, **kw: analyze_job(session, "acme.example", "Backend role", **kw),
    "analyze_fit": lambda session, **kw: analyze_fit_for_job(session, "<div>job</div>", "resume", **kw),
    "generate_resume": lambda session, **kw: generate_resume(session, "job", "resume", "extra", "fit", **kw),
    "generate_cover_letter": lambda session, **kw: generate_cover_letter(session, "job", "resume", "extra", "fit", **kw),
}

SDK_FALLBACKS = {
    "analyze_fit": "No analysis generated",
    "generate_resume": "Failed to generate resume",
    "generate_cover_letter": "Failed to generate cover letter",
}

SDK_FAILURES = {
    "analyze_fit": "Failed to analyze fit",
    "generate_resume": "Failed to generate resume",
    "generate_cover_letter": "Failed to generate cover letter",
}


@pytest.mark.parametrize("name", sorted(OPERATIONS))
@pytest.mark.parametrize("absent", [None, {}, False, ""])
def test_missing_session_is_rejected_before_any_call(name: str, absent, provider: FakeProvider) -> None:
    with pytest.raises(Unauthorized, match="Unauthorized"):
        OPERATIONS[name](absent, client=provider)
    assert provider.call_count == 0


@pytest.mark.parametrize("name", sorted(OPERATIONS))
def test_missing_session_never_reads_configuration(name: str, monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(*args, **kwargs):
        raise AssertionError("configuration must not be loaded for unauthorized calls")

    monkeypatch.setattr("jobcraft.operations.runner.load_settings", fail)
    monkeypatch.setattr("jobcraft.operations.runner.get_provider", fail)
    with pytest.raises(Unauthorized):
        OPERATIONS[name](None)


@pytest.mark.parametrize("name", sorted(OPERATIONS))
def test_completion_is_returned_unmodified(name: str, session: dict) -> None:
    completion = '  <div class="x">\n  <p>&nbsp;</p>\n</div>  '
    provider = FakeProvider(completion)
    assert OPERATIONS[name](session, client=provider) == completion
    assert provider.call_count == 1


def test_analyze_job_request_shape(session: dict, provider: FakeProvider) -> None:
    analyze_job(session, "", "Backend role", client=provider)
    request = provider.requests[0]
    assert request.model == "sonar"
    assert request.temperature == 0.7
    assert request.max_tokens == 1024
    assert [m.role for m in request.messages] == ["system", "user"]
    assert "professional job analysis assistant" in request.messages[0].content


@pytest.mark.parametrize(
    "name, model, temperature",
    [
        ("analyze_fit", "gpt-4o-mini", 0.7),
        ("generate_resume", "gpt-3.5-turbo", 0.7),
        ("generate_cover_letter", "o3-mini", None),
    ],
)
def test_sdk_operation_request_shape(name: str, model: str, temperature, session: dict, provider: FakeProvider) -> None:
    OPERATIONS[name](session, client=provider)
    request = provider.requests[0]
    assert request.model == model
    assert request.temperature == temperature
    assert request.max_tokens is None
    assert [m.role for m in request.messages] == ["user"]


@pytest.mark.parametrize("name", sorted(SDK_FALLBACKS))
@pytest.mark.parametrize("make_provider", [
    lambda: FakeProvider(error=ExtractionError("no content")),
    lambda: FakeProvider(completion=""),
])
def test_sdk_operations_fall_back_when_content_missing(name: str, make_provider, session: dict) -> None:
    assert OPERATIONS[name](session, client=make_provider()) == SDK_FALLBACKS[name]


@pytest.mark.parametrize("name", sorted(SDK_FAILURES))
def test_sdk_operations_wrap_provider_errors(
    name: str, session: dict, caplog: pytest.LogCaptureFixture
) -> None:
    cause = ProviderError("OpenAI request failed: quota exceeded")
    provider = FakeProvider(error=cause)
    with caplog.at_level(logging.ERROR):
        with pytest.raises(OperationError) as excinfo:
            OPERATIONS[name](session, client=provider)
    assert str(excinfo.value) == SDK_FAILURES[name]
    assert excinfo.value.__cause__ is cause
    assert provider.call_count == 1
    assert any(f"Error in {name}" in record.getMessage() for record in caplog.records)


def test_analyze_job_raises_when_content_missing(session: dict) -> None:
    with pytest.raises(ExtractionError):
        analyze_job(session, "", "desc", client=FakeProvider(error=ExtractionError("no content")))


def test_analyze_job_propagates_provider_error(session: dict) -> None:
    cause = ProviderError('API error: {"error": "bad"}')
    with pytest.raises(ProviderError) as excinfo:
        analyze_job(session, "", "desc", client=FakeProvider(error=cause))
    assert excinfo.value is cause


def test_analyze_job_http_error_message_contains_body(session: dict, monkeypatch: pytest.MonkeyPatch) -> None:
    body = {"error": {"message": "Invalid API key", "code": 401}}
    monkeypatch.setattr(requests, "post", lambda *a, **k: FakeResponse(401, body))
    settings = Settings(perplexity_api_key="pplx-test")
    with pytest.raises(ProviderError) as excinfo:
        analyze_job(session, None, "desc", settings=settings)
    assert json.dumps(body) in str(excinfo.value)


def test_analyze_job_end_to_end_scenario(session: dict, monkeypatch: pytest.MonkeyPatch) -> None:
    description = "Senior backend engineer, remote, Python/Go, 5 years"
    completion = '<div class="analysis">OK</div>'
    sent = []

    def fake_post(url, headers=None, json=None, **kwargs):
        sent.append(json)
        return FakeResponse(200, {"choices": [{"message": {"role": "assistant", "content": completion}}]})

    monkeypatch.setattr(requests, "post", fake_post)
    result = analyze_job(session, "", description, client=DirectHttpProvider("pplx-test"))

    assert result == completion
    prompt = sent[0]["messages"][1]["content"]
    assert description in prompt
    assert "Not provided" in prompt


def test_generate_resume_scenarios(session: dict) -> None:
    args = ("<div>job</div>", "Jane Doe, engineer", "Led migration to Go", "<div>fit</div>")
    completion = '<div class="resume">X</div>'
    assert generate_resume(session, *args, client=FakeProvider(completion)) == completion
    missing = FakeProvider(error=ExtractionError("no content"))
    assert generate_resume(session, *args, client=missing) == "Failed to generate resume"


def test_settings_overrides_are_used_with_injected_client(session: dict, provider: FakeProvider) -> None:
    settings = Settings()
    settings.operations["analyze_fit"] = dataclasses.replace(
        settings.operations["analyze_fit"], model="gpt-4o", temperature=0.2
    )
    analyze_fit_for_job(session, "job", "resume", client=provider, settings=settings)
    assert provider.requests[0].model == "gpt-4o"
    assert provider.requests[0].temperature == 0.2


def test_provider_built_from_settings(session: dict, monkeypatch: pytest.MonkeyPatch) -> None:
    built = []
    fake = FakeProvider("<div>built</div>")

    def fake_get_provider(kind, settings):
        built.append(kind)
        return fake

    monkeypatch.setattr("jobcraft.operations.runner.get_provider", fake_get_provider)
    assert generate_cover_letter(session, "a", "b", "c", "d", settings=Settings()) == "<div>built</div>"
    assert built == ["openai"]


def test_missing_api_key_is_reported(session: dict) -> None:
    with pytest.raises(ValueError, match="PERPLEXITY_API_KEY not provided"):
        analyze_job(session, "", "desc", settings=Settings())
