import io
import logging
import time

from google import genai
from google.genai import types
from PIL import Image, UnidentifiedImageError

import config
from errors import InvalidImageError, ProviderNotConfiguredError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.0-flash-exp"

# Formats Gemini accepts as inline image data; anything else is re-encoded as PNG.
SUPPORTED_IMAGE_FORMATS = {"PNG", "JPEG", "WEBP"}

_client = None


def get_client():
    global _client
    if _client is None:
        key = config.api_key("google")
        if not key:
            raise ProviderNotConfiguredError(
                "AI service is not configured. Please set your Google AI API key (GEMINI_API_KEY)."
            )
        _client = genai.Client(
            api_key=key,
            http_options=types.HttpOptions(timeout=config.GEMINI_TIMEOUT_MS),
        )
    return _client


def reset_client():
    global _client
    _client = None


def build_config(temperature=None, max_tokens=None):
    kwargs = {}
    if temperature is not None:
        kwargs["temperature"] = temperature
    if max_tokens is not None:
        kwargs["max_output_tokens"] = max_tokens
    return types.GenerateContentConfig(**kwargs)


def generate_text(client, model, contents, temperature=None, max_tokens=None):
    start = time.time()
    response = client.models.generate_content(
        model=model,
        contents=contents,
        config=build_config(temperature, max_tokens),
    )
    logger.info("Gemini %s answered in %.1fs", model, time.time() - start)
    return response.text or ""


def normalize_image(data):
    """Validate uploaded image bytes and return ``(bytes, mime_type)`` Gemini accepts."""
    try:
        img = Image.open(io.BytesIO(data))
        img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise InvalidImageError("Please select a valid image file") from e

    fmt = img.format
    if fmt in SUPPORTED_IMAGE_FORMATS:
        return data, Image.MIME[fmt]

    # verify() leaves the image unusable, so reopen before converting
    img = Image.open(io.BytesIO(data)).convert("RGBA")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue(), "image/png"


def image_part(upload):
    data, mime = normalize_image(upload.data)
    return types.Part.from_bytes(data=data, mime_type=mime)
