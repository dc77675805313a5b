"""Tests for the Perplexity chat-completions client."""

import pytest
import requests

from conftest import FakeResponse, FakeSession
from errors import PerplexityError, ProviderNotConfiguredError
from perplexity_client import PerplexityClient
from system_prompt import PERPLEXITY_SYSTEM_PROMPT


def completion(content):
    return {"choices": [{"message": {"content": content}}]}


def test_posts_chat_completion_and_returns_content():
    session = FakeSession(FakeResponse(payload=completion("<html></html>")))
    client = PerplexityClient(api_key="pk", base_url="https://api.test/", session=session)

    result = client.generate_content("Build a page", "sonar", temperature=0.2, max_tokens=1000)

    assert result == "<html></html>"
    call = session.calls[0]
    assert call["url"] == "https://api.test/chat/completions"
    assert call["headers"]["Authorization"] == "Bearer pk"
    assert call["json"]["model"] == "sonar"
    assert call["json"]["messages"] == [
        {"role": "system", "content": PERPLEXITY_SYSTEM_PROMPT},
        {"role": "user", "content": "Build a page"},
    ]
    assert call["json"]["temperature"] == 0.2
    assert call["json"]["max_tokens"] == 1000
    assert call["json"]["stream"] is False


def test_defaults_when_settings_missing():
    session = FakeSession(FakeResponse(payload=completion("ok")))
    client = PerplexityClient(api_key="pk", session=session)

    client.generate_content("prompt")

    body = session.calls[0]["json"]
    assert body["temperature"] == 0.7
    assert body["max_tokens"] == 4000


def test_zero_temperature_is_sent_as_is():
    session = FakeSession(FakeResponse(payload=completion("ok")))
    client = PerplexityClient(api_key="pk", session=session)

    client.generate_content("prompt", temperature=0)

    assert session.calls[0]["json"]["temperature"] == 0


def test_missing_key_fails_before_any_request():
    session = FakeSession(FakeResponse(payload=completion("ok")))
    client = PerplexityClient(api_key="", session=session)

    assert not client.is_configured()
    with pytest.raises(ProviderNotConfiguredError):
        client.generate_content("prompt")
    assert session.calls == []


def test_key_read_from_environment(monkeypatch):
    monkeypatch.setenv("PERPLEXITY_API_KEY", "from-env")

    assert PerplexityClient(session=FakeSession(None)).api_key == "from-env"


def test_http_error_includes_status_and_api_message():
    resp = FakeResponse(status_code=401, payload={"error": {"message": "Invalid API key"}}, reason="Unauthorized")
    client = PerplexityClient(api_key="pk", session=FakeSession(resp))

    with pytest.raises(PerplexityError) as exc:
        client.generate_content("prompt")

    assert exc.value.message == "Perplexity API error: 401 - Invalid API key"


def test_http_error_falls_back_to_reason():
    resp = FakeResponse(status_code=500, reason="Internal Server Error", json_error=True)
    client = PerplexityClient(api_key="pk", session=FakeSession(resp))

    with pytest.raises(PerplexityError, match="500 - Internal Server Error"):
        client.generate_content("prompt")


def test_empty_choices():
    client = PerplexityClient(api_key="pk", session=FakeSession(FakeResponse(payload={"choices": []})))

    with pytest.raises(PerplexityError, match="No response generated from Perplexity API"):
        client.generate_content("prompt")


def test_network_failure_is_wrapped():
    session = FakeSession(requests.ConnectionError("connection refused"))
    client = PerplexityClient(api_key="pk", session=session)

    with pytest.raises(PerplexityError, match="request failed"):
        client.generate_content("prompt")
