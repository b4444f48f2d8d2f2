from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from boostme.exceptions import CoachError
from boostme.settings import get_settings


def _build_session():
    session = requests.Session()
    retry = Retry(
        total=2,
        backoff_factor=0.5,
        status_forcelist=(502, 503, 504),
        allowed_methods=("GET", "POST"),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry, pool_connections=4, pool_maxsize=4)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


_SESSION = _build_session()


def relay_url():
    return (get_settings().relay_url or "").rstrip("/")


def request(method: str, path: str, json: dict | None = None, base_url: str | None = None, timeout: int | None = None, session=None) -> Any:
    base = (base_url or relay_url()).rstrip("/")
    if not base:
        raise CoachError("RELAY_URL not configured")
    url = f"{base}{path}"
    timeout = timeout or get_settings().relay_timeout_seconds
    try:
        response = (session or _SESSION).request(method, url, json=json, timeout=timeout)
    except requests.RequestException as exc:
        raise CoachError(f"Relay unreachable: {exc}") from exc
    if not response.ok:
        try:
            detail = response.json()
        except ValueError:
            detail = response.text
        raise CoachError(f"Relay error {response.status_code} {response.reason}: {detail}")
    try:
        return response.json()
    except ValueError as exc:
        raise CoachError("Relay returned a non-JSON body") from exc


def post_chat(message, profile, mode, history=None, **kwargs):
    body = {"message": message, "profile": profile, "mode": mode}
    if history:
        body["history"] = history
    payload = request("POST", "/chat", json=body, **kwargs)
    if not isinstance(payload, dict) or "reply" not in payload:
        raise CoachError("Relay reply missing")
    return str(payload.get("reply") or "")
