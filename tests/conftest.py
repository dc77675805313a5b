"""Shared fixtures: fake Gemini/HTTP clients and a signed-in Flask client."""

import io
from types import SimpleNamespace

import pytest
from PIL import Image

from models import ImageUpload


def make_png(size=(4, 4), color=(139, 92, 246)):
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, format="PNG")
    return buf.getvalue()


def make_bmp(size=(4, 4)):
    buf = io.BytesIO()
    Image.new("RGB", size, (0, 0, 0)).save(buf, format="BMP")
    return buf.getvalue()


class FakeModels:
    """Stands in for ``client.models``; replies are consumed in order."""

    def __init__(self, replies):
        self.replies = list(replies)
        self.calls = []

    def generate_content(self, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


class FakeGeminiClient:
    def __init__(self, *replies):
        self.models = FakeModels(replies)


def text_reply(text):
    return SimpleNamespace(text=text, candidates=[], usage_metadata=None)


def image_reply(data=b"\x89PNG", mime_type="image/png", text=None, total_tokens=1290):
    parts = []
    if text:
        parts.append(SimpleNamespace(text=text, inline_data=None))
    parts.append(SimpleNamespace(text=None, inline_data=SimpleNamespace(data=data, mime_type=mime_type)))
    return SimpleNamespace(
        text=text,
        candidates=[SimpleNamespace(content=SimpleNamespace(parts=parts))],
        usage_metadata=SimpleNamespace(total_token_count=total_tokens),
    )


class FakeResponse:
    def __init__(self, status_code=200, payload=None, reason="OK", json_error=False):
        self.status_code = status_code
        self.payload = payload
        self.reason = reason
        self.json_error = json_error

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self.json_error:
            raise ValueError("No JSON object could be decoded")
        return self.payload


class FakeSession:
    """Records ``post`` calls and returns a canned response (or raises it)."""

    def __init__(self, response):
        self.response = response
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


@pytest.fixture
def png_bytes():
    return make_png()


@pytest.fixture
def png_upload(png_bytes):
    return ImageUpload(data=png_bytes, mime_type="image/png", filename="design.png")


@pytest.fixture(autouse=True)
def provider_keys(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "test-gemini-key")
    monkeypatch.setenv("PERPLEXITY_API_KEY", "test-perplexity-key")


@pytest.fixture
def flask_app():
    import app as app_module

    app_module.app.config.update(TESTING=True, SECRET_KEY="test-secret")
    app_module.store.clear()
    yield app_module
    app_module.store.clear()


@pytest.fixture
def client(flask_app):
    return flask_app.app.test_client()


@pytest.fixture
def auth_client(client):
    with client.session_transaction() as sess:
        sess["token"] = "test-token"
        sess["user"] = {"id": "u1", "email": "dev@example.com"}
    return client
