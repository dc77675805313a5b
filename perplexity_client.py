import logging
import time

import requests

import config
from errors import PerplexityError, ProviderNotConfiguredError
from system_prompt import PERPLEXITY_SYSTEM_PROMPT

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "llama-3.1-sonar-small-128k-online"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 4000


class PerplexityClient:
    """Thin client for the Perplexity chat-completions endpoint."""

    def __init__(self, api_key=None, base_url=None, timeout=None, session=None):
        self.api_key = config.api_key("perplexity") if api_key is None else api_key
        self.base_url = (base_url or config.PERPLEXITY_BASE_URL).rstrip("/")
        self.timeout = timeout or config.HTTP_TIMEOUT
        self.session = session or requests.Session()
        if not self.api_key:
            logger.warning("PERPLEXITY_API_KEY is not set")

    def is_configured(self):
        return bool(self.api_key)

    def generate_content(self, prompt, model=DEFAULT_MODEL, temperature=None, max_tokens=None):
        if not self.is_configured():
            raise ProviderNotConfiguredError(
                "Perplexity API key is not configured. "
                "Please set PERPLEXITY_API_KEY environment variable."
            )

        payload = {
            "model": model,
            "messages": [
                {"role": "system", "content": PERPLEXITY_SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "temperature": DEFAULT_TEMPERATURE if temperature is None else temperature,
            "max_tokens": max_tokens or DEFAULT_MAX_TOKENS,
            "stream": False,
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

        start = time.time()
        try:
            resp = self.session.post(
                f"{self.base_url}/chat/completions",
                headers=headers,
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.exception("Perplexity request failed")
            raise PerplexityError(f"Perplexity API request failed: {e}") from e

        if not resp.ok:
            raise PerplexityError(
                f"Perplexity API error: {resp.status_code} - {_error_message(resp)}"
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise PerplexityError("Perplexity API returned invalid JSON") from e

        choices = data.get("choices") or []
        if not choices:
            raise PerplexityError("No response generated from Perplexity API")

        logger.info("Perplexity %s answered in %.1fs", model, time.time() - start)
        return choices[0].get("message", {}).get("content") or ""


def _error_message(resp):
    try:
        body = resp.json()
    except ValueError:
        body = {}
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return error["message"]
    return resp.reason
