import re

HTML_FENCE = re.compile(r"```html\n?")
COMPONENT_FENCE = re.compile(r"```(?:tsx|typescript|ts|jsx)\n?")
ANY_FENCE = re.compile(r"```")
FIGMA_KEY = re.compile(r"figma\.com/(?:file|design|proto)/([a-zA-Z0-9]+)")

DOCTYPE = "<!DOCTYPE html>"

FEATURE_MARKERS = [
    ("Navigation", ("<nav", "navigation")),
    ("Forms", ("<form", "input")),
    ("Interactive Elements", ("<button", "onclick")),
    ("Responsive Design", ("@media", "responsive")),
    ("Animations", ("animation", "transition")),
    ("Images", ("<img", "background-image")),
    ("Modern Layout", ("grid", "flexbox", "flex")),
    ("JavaScript Functionality", ("addEventListener", "function")),
]


def clean_html_response(text):
    """Strip markdown fences from a model reply and normalise the doctype.

    A doctype is only added when the document opens with ``<html``; fragments
    and replies with leading prose are returned trimmed but otherwise intact.
    """
    html = ANY_FENCE.sub("", HTML_FENCE.sub("", text or "")).strip()
    lowered = html.lower()
    if not lowered.startswith(DOCTYPE.lower()) and lowered.startswith("<html"):
        html = DOCTYPE + "\n" + html
    return html


def clean_component_response(text):
    return ANY_FENCE.sub("", COMPONENT_FENCE.sub("", text or "")).strip()


def extract_features(html, requirements):
    features = [
        label for label, markers in FEATURE_MARKERS
        if any(marker in html for marker in markers)
    ]
    if requirements.responsive:
        features.append("Mobile Responsive")
    if requirements.animations:
        features.append("CSS Animations")
    if requirements.interactive:
        features.append("User Interactions")
    return list(dict.fromkeys(features))


def extract_figma_id(url):
    match = FIGMA_KEY.search(url or "")
    return match.group(1) if match else "unknown"
