import logging
from functools import wraps

import requests
from flask import jsonify, redirect, request, session, url_for

import config
from models import ApiResponse

logger = logging.getLogger(__name__)

NETWORK_ERROR = "Network error. Please try again."
MIN_PASSWORD_LENGTH = 6


class AuthClient:
    """Client for the external credentials backend (``/api/signin``, ``/api/signup``)."""

    def __init__(self, base_url=None, timeout=None, session=None):
        self.base_url = (base_url or config.AUTH_API_URL).rstrip("/")
        self.timeout = timeout or config.HTTP_TIMEOUT
        self.session = session or requests.Session()

    def _post(self, path, payload):
        try:
            resp = self.session.post(
                f"{self.base_url}{path}",
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
            data = resp.json()
        except (requests.RequestException, ValueError):
            logger.exception("Auth backend call to %s failed", path)
            return None, None
        return resp, data if isinstance(data, dict) else {}

    def login(self, credentials):
        resp, data = self._post(
            "/api/signin", {"email": credentials.email, "password": credentials.password}
        )
        if resp is None:
            return ApiResponse(success=False, message=NETWORK_ERROR)
        if resp.ok:
            return ApiResponse(success=True, data=data)
        return ApiResponse(success=False, message=data.get("message"))

    def signup(self, credentials):
        resp, data = self._post(
            "/api/signup", {"email": credentials.email, "password": credentials.password}
        )
        if resp is None:
            return ApiResponse(success=False, message=NETWORK_ERROR)
        if resp.ok:
            return ApiResponse(success=True, data=data, message=data.get("message"))
        return ApiResponse(success=False, message=data.get("message"))


def validate_signup(credentials):
    """Return an error message for invalid sign-up input, or None."""
    if credentials.password != credentials.confirm_password:
        return "Passwords do not match"
    if len(credentials.password) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
    return None


def remember_login(data):
    session["token"] = data.get("token")
    session["user"] = data.get("user")


def forget_login():
    session.pop("token", None)
    session.pop("user", None)


def is_authenticated():
    return bool(session.get("token")) and bool(session.get("user"))


def login_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        if is_authenticated():
            return view(*args, **kwargs)
        if request.path.startswith("/api/"):
            return jsonify({"error": "Authentication required"}), 401
        return redirect(url_for("login", next=request.path))
    return wrapped
