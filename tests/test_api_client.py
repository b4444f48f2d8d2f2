import pytest
import requests

from boostme.data import api_client
from boostme.exceptions import CoachError


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self.ok = status_code < 400
        self.reason = "OK" if self.ok else "Error"
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def request(self, method, url, json=None, timeout=None):
        self.calls.append((method, url, json, timeout))
        if self.error:
            raise self.error
        return self.response


def test_post_chat_sends_body_and_returns_reply():
    session = FakeSession(FakeResponse(payload={"reply": "You got this"}))
    reply = api_client.post_chat(
        "hi",
        {"name": "Dina"},
        "chat",
        history=[{"role": "user", "text": "a"}],
        base_url="http://relay/",
        timeout=5,
        session=session,
    )
    assert reply == "You got this"
    method, url, body, timeout = session.calls[0]
    assert (method, url, timeout) == ("POST", "http://relay/chat", 5)
    assert body == {"message": "hi", "profile": {"name": "Dina"}, "mode": "chat", "history": [{"role": "user", "text": "a"}]}


def test_post_chat_omits_empty_history():
    session = FakeSession(FakeResponse(payload={"reply": "ok"}))
    api_client.post_chat("hi", None, "reflect", base_url="http://relay", timeout=5, session=session)
    assert "history" not in session.calls[0][2]


@pytest.mark.parametrize(
    "session",
    [
        FakeSession(FakeResponse(500, payload={"error": "Gemini error"})),
        FakeSession(FakeResponse(200, payload=None, text="<html>")),
        FakeSession(FakeResponse(200, payload={"message": "no reply"})),
        FakeSession(error=requests.ConnectionError("refused")),
    ],
)
def test_post_chat_failures_raise(session):
    with pytest.raises(CoachError):
        api_client.post_chat("hi", None, "chat", base_url="http://relay", timeout=5, session=session)
