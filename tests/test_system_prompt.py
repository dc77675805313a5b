"""Tests for prompt assembly."""

from models import HTMLRequirements
from system_prompt import (
    COMPONENT_FRAMEWORK_INSTRUCTIONS,
    FRAMEWORK_INSTRUCTIONS,
    PERPLEXITY_HTML_SUFFIX,
    QUICK_TIPS,
    build_component_prompt,
    build_html_prompt,
    build_image_analysis_prompt,
    with_html_suffix,
)


def test_html_prompt_carries_context_and_flags():
    reqs = HTMLRequirements(name="PricingTable", framework="tailwind", animations=True)

    prompt = build_html_prompt("Three pricing tiers", reqs)

    assert "Three pricing tiers" in prompt
    assert "- Page/Component name: PricingTable" in prompt
    assert "- Responsive design: true" in prompt
    assert "- Include animations: true" in prompt
    assert "- Interactive elements: false" in prompt
    assert "- Include smooth CSS animations and transitions" in prompt
    assert "- Add JavaScript for interactive functionality" not in prompt
    assert FRAMEWORK_INSTRUCTIONS["tailwind"] in prompt


def test_component_prompt_uses_styling_instructions():
    reqs = HTMLRequirements(name="Card", react_framework="mui")

    prompt = build_component_prompt("A card", reqs)

    assert "using mui" in prompt
    assert COMPONENT_FRAMEWORK_INSTRUCTIONS["mui"] in prompt
    assert "- Include proper error handling if needed" in prompt


def test_component_prompt_can_drop_error_handling_line():
    reqs = HTMLRequirements(name="Card")

    prompt = build_component_prompt("A card", reqs, include_error_handling=False)

    assert "error handling" not in prompt


def test_component_placeholder_survives_formatting():
    prompt = build_component_prompt("x", HTMLRequirements(name="Card"))

    assert "{ComponentName}" in prompt


def test_image_analysis_prompt_falls_back_without_description():
    assert "No additional description provided" in build_image_analysis_prompt("")
    assert "dark hero" in build_image_analysis_prompt("dark hero")


def test_with_html_suffix_appends():
    assert with_html_suffix("base").endswith(PERPLEXITY_HTML_SUFFIX)


def test_quick_tips_have_prompts():
    assert QUICK_TIPS
    for category in QUICK_TIPS:
        assert category["title"] and category["color"].startswith("#")
        for tip in category["prompts"]:
            assert tip["prompt"]
