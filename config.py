import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()

GEMINI_TIMEOUT_MS = int(os.environ.get("GEMINI_TIMEOUT_MS", "300000"))
PERPLEXITY_BASE_URL = os.environ.get("PERPLEXITY_BASE_URL", "https://api.perplexity.ai")

AUTH_API_URL = os.environ.get("AUTH_API_URL", "http://localhost:5000")
HTTP_TIMEOUT = float(os.environ.get("HTTP_TIMEOUT", "60"))

SECRET_KEY = os.environ.get("SECRET_KEY", "snap2-ui-dev")
IMAGE_MODEL = os.environ.get("IMAGE_MODEL", "gemini-3.1-flash-image-preview")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
PORT = int(os.environ.get("PORT", "5001"))

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Keys are looked up in the environment on every call.
PROVIDER_KEY_VARS = {
    "google": "GEMINI_API_KEY",
    "perplexity": "PERPLEXITY_API_KEY",
}

_logging_configured = False


def api_key(provider_id):
    var = PROVIDER_KEY_VARS.get(provider_id)
    return os.environ.get(var, "") if var else ""


def is_provider_configured(provider_id):
    return bool(api_key(provider_id))


def configure_logging(level=None):
    global _logging_configured
    if _logging_configured:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(level or LOG_LEVEL)
    _logging_configured = True
