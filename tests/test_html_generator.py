"""Tests for the generation pipeline, driven by fake model clients."""

import pytest

from conftest import FakeGeminiClient, text_reply
from errors import GenerationError, PerplexityError, ProviderNotConfiguredError
from html_generator import HTMLGenerator
from models import HTMLGeneratorConfig, HTMLInput, HTMLRequirements, ProgressPhase
from system_prompt import PERPLEXITY_HTML_SUFFIX

PAGE = "```html\n<html><body><nav>Menu</nav></body></html>\n```"
COMPONENT = "```tsx\nexport default function Landing() { return null; }\n```"


class FakePerplexity:
    def __init__(self, *replies, configured=True):
        self.replies = list(replies)
        self.prompts = []
        self.configured = configured

    def is_configured(self):
        return self.configured

    def generate_content(self, prompt, model, temperature=None, max_tokens=None):
        self.prompts.append({"prompt": prompt, "model": model, "temperature": temperature})
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


def text_input(**kwargs):
    return HTMLInput(type="text", description=kwargs.pop("description", "A landing page"), **kwargs)


@pytest.fixture
def events():
    return []


def test_text_generation_reports_progress_in_order(events):
    client = FakeGeminiClient(text_reply(PAGE), text_reply(COMPONENT))
    generator = HTMLGenerator(on_progress=events.append, client=client)

    generated = generator.generate_html(text_input(), HTMLRequirements(name="Landing"))

    assert [(e.phase, e.progress) for e in events] == [
        (ProgressPhase.ANALYZING, 10),
        (ProgressPhase.GENERATING, 40),
        (ProgressPhase.GENERATING, 70),
        (ProgressPhase.COMPLETE, 100),
    ]
    assert generated.html == "<!DOCTYPE html>\n<html><body><nav>Menu</nav></body></html>"
    assert generated.react_code == "export default function Landing() { return null; }"
    assert generated.raw_response == PAGE
    assert "Navigation" in generated.features
    assert generated.metadata.input_type == "text"
    assert generated.metadata.ai_model == "gemini-2.0-flash-exp"
    assert generated.name == "Landing"


def test_text_context_lists_requirements():
    client = FakeGeminiClient(text_reply(PAGE), text_reply(COMPONENT))
    generator = HTMLGenerator(client=client)

    generator.generate_html(
        text_input(requirements=["Dark mode", "Sticky header"]), HTMLRequirements(name="Landing")
    )

    html_prompt = client.models.calls[0]["contents"]
    assert "A landing page\n\nAdditional requirements:\n- Dark mode\n- Sticky header" in html_prompt


def test_settings_reach_the_model_config():
    client = FakeGeminiClient(text_reply(PAGE), text_reply(COMPONENT))
    settings = HTMLGeneratorConfig(model="gemini-1.5-pro", temperature=0.3, max_tokens=2048)

    HTMLGenerator(settings, client=client).generate_html(text_input(), HTMLRequirements(name="X"))

    call = client.models.calls[0]
    assert call["model"] == "gemini-1.5-pro"
    assert call["config"].temperature == 0.3
    assert call["config"].max_output_tokens == 2048


def test_figma_context_uses_file_key():
    generator = HTMLGenerator(client=FakeGeminiClient())
    figma = HTMLInput(type="figma", url="https://www.figma.com/file/Abc123/Shop", description="Figma design")

    context = generator.analyze_input(figma)

    assert context.startswith("Figma design with ID: Abc123. Create an HTML page based on this Figma design.")


def test_image_input_is_analysed_first(png_upload):
    client = FakeGeminiClient(
        text_reply("Two column layout with a hero image"),
        text_reply(PAGE),
        text_reply(COMPONENT),
    )
    generator = HTMLGenerator(client=client)
    input_ = HTMLInput(type="image", image=png_upload, description="marketing page")

    generated = generator.generate_html(input_, HTMLRequirements(name="Hero"))

    analysis_contents = client.models.calls[0]["contents"]
    assert "marketing page" in analysis_contents[0]
    assert len(analysis_contents) == 2
    assert "Two column layout with a hero image" in client.models.calls[1]["contents"]
    assert "image" not in generated.metadata.original_input


def test_perplexity_route_appends_html_suffix():
    perplexity = FakePerplexity(PAGE, COMPONENT)
    settings = HTMLGeneratorConfig(provider="perplexity", model="sonar", temperature=0.5)
    generator = HTMLGenerator(settings, perplexity=perplexity)

    generated = generator.generate_html(text_input(), HTMLRequirements(name="Landing"))

    assert perplexity.prompts[0]["prompt"].endswith(PERPLEXITY_HTML_SUFFIX)
    assert perplexity.prompts[0]["model"] == "sonar"
    assert perplexity.prompts[0]["temperature"] == 0.5
    assert "error handling" not in perplexity.prompts[1]["prompt"]
    assert PERPLEXITY_HTML_SUFFIX not in perplexity.prompts[1]["prompt"]
    assert generated.react_code == "export default function Landing() { return null; }"
    assert generated.raw_response == PAGE


def test_failure_emits_error_event_and_reraises(events):
    perplexity = FakePerplexity(PerplexityError("Perplexity API error: 429 - Too Many Requests"))
    settings = HTMLGeneratorConfig(provider="perplexity", model="sonar")
    generator = HTMLGenerator(settings, on_progress=events.append, perplexity=perplexity)

    with pytest.raises(PerplexityError):
        generator.generate_html(text_input(), HTMLRequirements(name="Landing"))

    last = events[-1]
    assert last.phase == ProgressPhase.ERROR
    assert last.progress == 0
    assert last.message == "Error: Perplexity API error: 429 - Too Many Requests"


def test_unconfigured_provider_is_rejected(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY")
    generator = HTMLGenerator()

    assert not generator.is_configured()
    with pytest.raises(ProviderNotConfiguredError, match="GEMINI_API_KEY"):
        generator.generate_html(text_input(), HTMLRequirements(name="Landing"))


def test_unconfigured_perplexity_client_is_rejected():
    settings = HTMLGeneratorConfig(provider="perplexity", model="sonar")
    generator = HTMLGenerator(settings, perplexity=FakePerplexity(configured=False))

    with pytest.raises(ProviderNotConfiguredError, match="PERPLEXITY_API_KEY"):
        generator.generate_html(text_input(), HTMLRequirements(name="Landing"))


def test_image_input_without_image():
    generator = HTMLGenerator(client=FakeGeminiClient())

    with pytest.raises(GenerationError, match="Please select an image"):
        generator.analyze_input(HTMLInput(type="image"))
