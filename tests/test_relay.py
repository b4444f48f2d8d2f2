import pytest
from fastapi.testclient import TestClient

from backend.main import create_app
from backend.routes import chat
from boostme.exceptions import CoachError
from boostme.services import prompts


class FakeGemini:
    def __init__(self, reply="Keep going!", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def agenerate(self, contents, system_instruction=None, schema=None):
        self.calls.append({"contents": contents, "system_instruction": system_instruction, "schema": schema})
        if self.error:
            raise self.error
        return self.reply


@pytest.fixture
def gemini():
    return FakeGemini()


@pytest.fixture
def client(gemini):
    app = create_app()
    app.dependency_overrides[chat.get_gemini_client] = lambda: gemini
    return TestClient(app, raise_server_exceptions=False)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_chat_uses_history_and_system_instruction(client, gemini):
    response = client.post(
        "/chat",
        json={
            "message": "I have an interview",
            "profile": {"name": "Dina", "role": "Student", "goal": "Speak up"},
            "history": [{"role": "user", "text": "Hi"}, {"role": "model", "text": "Hello!"}],
        },
    )
    assert response.status_code == 200
    assert response.json() == {"reply": "Keep going!"}
    call = gemini.calls[0]
    assert [item["role"] for item in call["contents"]] == ["user", "model", "user"]
    assert "- Name: Dina" in call["system_instruction"]
    assert call["schema"] is None


def test_structured_mode_sends_schema(client, gemini):
    gemini.reply = '{"missions": ["A"]}'
    response = client.post("/chat", json={"message": "suggest", "mode": "suggest_activities"})
    assert response.status_code == 200
    assert gemini.calls[0]["schema"] == prompts.MISSIONS_SCHEMA
    assert gemini.calls[0]["contents"].endswith('User says: "suggest"')


def test_unknown_mode_is_treated_as_chat(client, gemini):
    response = client.post("/chat", json={"message": "hey", "mode": "poetry"})
    assert response.status_code == 200
    assert gemini.calls[0]["system_instruction"] is not None


def test_provider_failure_returns_500(client, gemini):
    gemini.error = CoachError("quota")
    response = client.post("/chat", json={"message": "hey"})
    assert response.status_code == 500
    assert response.json() == {"error": "Gemini error"}


def test_unexpected_failure_returns_500(client, gemini):
    gemini.error = RuntimeError("bug")
    response = client.post("/chat", json={"message": "hey"})
    assert response.status_code == 500
    assert "error" in response.json()


def test_missing_message_returns_422(client):
    response = client.post("/chat", json={"mode": "chat"})
    assert response.status_code == 422
    assert "error" in response.json()
