"""Tests for the provider/model catalogue."""

from providers import (
    AI_PROVIDERS,
    catalog,
    get_default_model,
    get_models_by_provider,
    get_provider_by_id,
    is_known_model,
)


def test_lookup_by_id():
    assert get_provider_by_id("google")["name"] == "Google Gemini"
    assert get_provider_by_id("openai") is None


def test_models_for_unknown_provider_are_empty():
    assert get_models_by_provider("openai") == []
    assert get_default_model("openai") == ""


def test_default_model_is_first_listed():
    assert get_default_model("google") == "gemini-2.0-flash-exp"
    assert get_default_model("perplexity") == AI_PROVIDERS[1]["models"][0]["id"]


def test_is_known_model():
    assert is_known_model("google", "gemini-1.5-pro")
    assert not is_known_model("perplexity", "gemini-1.5-pro")


def test_catalog_reports_configured_keys(monkeypatch):
    monkeypatch.delenv("PERPLEXITY_API_KEY")

    configured = {p["id"]: p["configured"] for p in catalog()}

    assert configured == {"google": True, "perplexity": False}
