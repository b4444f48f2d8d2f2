from __future__ import annotations

import json
import logging

import httpx

from boostme.exceptions import CoachError

logger = logging.getLogger(__name__)

API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.5-flash"


def _as_contents(contents):
    if isinstance(contents, str):
        return [{"role": "user", "parts": [{"text": contents}]}]
    return list(contents)


def extract_text(payload) -> str:
    candidates = (payload or {}).get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(str(part.get("text") or "") for part in parts)


class GeminiClient:
    """Thin REST client for Gemini ``generateContent`` and ``streamGenerateContent``."""

    def __init__(
        self,
        api_key: str | None,
        model: str = DEFAULT_MODEL,
        timeout: float = 30,
        base_url: str = API_BASE,
        transport: httpx.BaseTransport | None = None,
        async_transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key or ""
        self.model = model
        self.timeout = timeout
        self.base_url = base_url.rstrip("/")
        self._transport = transport
        self._async_transport = async_transport

    def _url(self, method: str) -> str:
        return f"{self.base_url}/models/{self.model}:{method}"

    def _headers(self) -> dict:
        if not self.api_key:
            raise CoachError("Gemini API key not configured")
        return {"x-goog-api-key": self.api_key, "Content-Type": "application/json"}

    def _payload(self, contents, system_instruction=None, schema=None) -> dict:
        payload: dict = {"contents": _as_contents(contents)}
        if system_instruction:
            payload["systemInstruction"] = {"parts": [{"text": system_instruction}]}
        if schema is not None:
            payload["generationConfig"] = {
                "responseMimeType": "application/json",
                "responseSchema": schema,
            }
        return payload

    @staticmethod
    def _check(response: httpx.Response) -> dict:
        if response.status_code >= 400:
            raise CoachError(f"Gemini error {response.status_code}: {response.text[:200]}")
        try:
            return response.json()
        except ValueError as exc:
            raise CoachError("Gemini returned a non-JSON body") from exc

    def generate(self, contents, system_instruction=None, schema=None) -> str:
        payload = self._payload(contents, system_instruction, schema)
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.post(self._url("generateContent"), json=payload, headers=self._headers())
        except httpx.HTTPError as exc:
            raise CoachError(f"Gemini request failed: {exc}") from exc
        return extract_text(self._check(response))

    async def agenerate(self, contents, system_instruction=None, schema=None) -> str:
        payload = self._payload(contents, system_instruction, schema)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._async_transport) as client:
                response = await client.post(self._url("generateContent"), json=payload, headers=self._headers())
        except httpx.HTTPError as exc:
            raise CoachError(f"Gemini request failed: {exc}") from exc
        return extract_text(self._check(response))

    def stream(self, contents, system_instruction=None):
        """Yield text fragments from a server-sent-events stream."""
        payload = self._payload(contents, system_instruction)
        headers = self._headers()
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                with client.stream(
                    "POST",
                    self._url("streamGenerateContent"),
                    params={"alt": "sse"},
                    json=payload,
                    headers=headers,
                ) as response:
                    if response.status_code >= 400:
                        response.read()
                        raise CoachError(f"Gemini error {response.status_code}: {response.text[:200]}")
                    for line in response.iter_lines():
                        if not line.startswith("data:"):
                            continue
                        data = line[len("data:"):].strip()
                        if not data:
                            continue
                        try:
                            chunk = json.loads(data)
                        except ValueError:
                            logger.warning("Skipping malformed stream chunk")
                            continue
                        text = extract_text(chunk)
                        if text:
                            yield text
        except httpx.HTTPError as exc:
            raise CoachError(f"Gemini stream failed: {exc}") from exc
