"""Coaching client.

``CoachTransport`` has two implementations chosen once at construction:
``DirectTransport`` calls Gemini from this process, ``RelayTransport`` makes one
HTTP hop to the relay that holds the provider key. ``CoachClient`` sits on top
of either and turns every failure into the mode's fallback content.
"""
from __future__ import annotations

import json
import logging
import threading
import time
from datetime import datetime
from uuid import uuid4

from boostme.constants import (
    CHAT_APOLOGY,
    CHAT_CLEARED,
    CHAT_GREETING,
    FALLBACK_MISSION_TEXTS,
    MISSIONS_REQUEST,
    MOTIVATION_EMPTY_FALLBACK,
    MOTIVATION_ERROR_FALLBACK,
    REFLECT_EMPTY_FALLBACK,
    REFLECT_ERROR_FALLBACK,
)
from boostme.data import api_client
from boostme.exceptions import ChatBusyError, CoachError
from boostme.services import prompts
from boostme.services.gemini import GeminiClient

logger = logging.getLogger(__name__)


class CoachTransport:
    def chat_stream(self, message, history, profile):
        """Lazy iterator of reply fragments for one chat turn."""
        raise NotImplementedError

    def complete(self, mode, message, profile):
        """Single complete reply; structured modes return JSON text."""
        raise NotImplementedError


class DirectTransport(CoachTransport):
    def __init__(self, gemini: GeminiClient, language="English"):
        self.gemini = gemini
        self.language = language

    def chat_stream(self, message, history, profile):
        return self.gemini.stream(
            prompts.build_contents(message, history),
            system_instruction=prompts.system_instruction(profile, "chat", self.language),
        )

    def complete(self, mode, message, profile):
        return self.gemini.generate(
            prompts.build_prompt(mode, message, profile, self.language),
            schema=prompts.response_schema(mode),
        )


class RelayTransport(CoachTransport):
    def __init__(self, base_url=None, post=None):
        self.base_url = base_url
        self._post = post or api_client.post_chat

    def _call(self, mode, message, profile, history=None):
        kwargs = {"base_url": self.base_url} if self.base_url else {}
        return self._post(message, profile, mode, history=history, **kwargs)

    def chat_stream(self, message, history, profile):
        # The relay answers in one piece; expose it as a one-fragment stream.
        yield self._call("chat", message, profile, history=history)

    def complete(self, mode, message, profile):
        return self._call(mode, message, profile)


def _strip_fences(text):
    cleaned = (text or "").strip()
    if cleaned.startswith("```"):
        cleaned = cleaned.strip("`")
        if cleaned.lower().startswith("json"):
            cleaned = cleaned[4:]
    return cleaned.strip()


def parse_missions(reply):
    payload = json.loads(_strip_fences(reply) or "{}")
    items = payload.get("missions") if isinstance(payload, dict) else None
    if not isinstance(items, list):
        return []
    return [str(item).strip() for item in items if str(item).strip()]


def parse_task_steps(reply):
    payload = json.loads(_strip_fences(reply) or "[]")
    if not isinstance(payload, list):
        raise ValueError("Task steps must be a list")
    steps = []
    for item in payload:
        if not isinstance(item, dict):
            continue
        steps.append(
            {
                "title": str(item.get("title") or "").strip(),
                "description": str(item.get("description") or "").strip(),
                "duration": str(item.get("duration") or "").strip(),
            }
        )
    return steps


def build_missions(texts, base_id=None):
    base = base_id if base_id is not None else int(time.time() * 1000)
    return [{"id": base + index, "text": text, "completed": False} for index, text in enumerate(texts)]


def fallback_missions():
    return build_missions(FALLBACK_MISSION_TEXTS, base_id=int(time.time() * 1000) + 1)


def new_message(role, text, message_id=None):
    return {
        "id": message_id or uuid4().hex,
        "role": role,
        "text": text,
        "timestamp": datetime.now(),
    }


class CoachClient:
    def __init__(self, transport: CoachTransport, profile_getter=None):
        self.transport = transport
        self._profile_getter = profile_getter

    def profile(self):
        if self._profile_getter is None:
            return None
        try:
            return self._profile_getter()
        except Exception:
            logger.exception("Error reading profile for coaching context")
            return None

    def new_chat_session(self):
        return ChatSession(self)

    def reflect(self, score, mood, note):
        try:
            reply = self.transport.complete("reflect", prompts.reflect_message(score, mood, note), self.profile())
        except Exception:
            logger.exception("Error generating check-in support")
            return REFLECT_ERROR_FALLBACK
        return (reply or "").strip() or REFLECT_EMPTY_FALLBACK

    def suggest_activities(self):
        try:
            reply = self.transport.complete("suggest_activities", MISSIONS_REQUEST, self.profile())
            texts = parse_missions(reply)
            if not texts:
                raise CoachError("No missions generated")
        except Exception:
            logger.exception("Error generating tailored missions")
            return fallback_missions()
        return build_missions(texts)

    def motivation(self, mood):
        try:
            reply = self.transport.complete("motivation", mood, None)
        except Exception:
            logger.exception("Error generating motivation")
            return MOTIVATION_ERROR_FALLBACK
        return (reply or "").strip() or MOTIVATION_EMPTY_FALLBACK

    def break_down_task(self, task_description):
        try:
            reply = self.transport.complete("task_breakdown", task_description, None)
            if not (reply or "").strip():
                return []
            return parse_task_steps(reply)
        except Exception as exc:
            logger.exception("Error breaking down task")
            raise CoachError("Failed to break down task. Please try again.") from exc


class ChatSession:
    """Conversation state for the coach tab.

    History lives here for both transports. ``send`` folds the fragment
    stream into the reply text and calls ``on_update`` after each fragment.
    A second ``send`` while one is streaming raises ``ChatBusyError``.
    """

    def __init__(self, client: CoachClient, greeting=CHAT_GREETING):
        self.client = client
        self.messages = [dict(new_message("model", greeting, "init"), local=True)]
        self._busy = threading.Lock()

    @property
    def is_typing(self):
        return self._busy.locked()

    def history(self):
        return [{"role": m["role"], "text": m["text"]} for m in self.messages if not m.get("local") and m["text"]]

    def clear(self):
        if self.is_typing:
            raise ChatBusyError("Reply still streaming")
        self.messages = [dict(new_message("model", CHAT_CLEARED), local=True)]

    def send(self, text, on_update=None):
        text = (text or "").strip()
        if not text:
            return None
        if not self._busy.acquire(blocking=False):
            raise ChatBusyError("Reply still streaming")
        try:
            history = self.history()
            self.messages.append(new_message("user", text))
            reply = new_message("model", "")
            full_text = ""
            try:
                stream = self.client.transport.chat_stream(text, history, self.client.profile())
                self.messages.append(reply)
                for fragment in stream:
                    full_text += fragment or ""
                    reply["text"] = full_text
                    if on_update is not None:
                        on_update(full_text)
            except Exception:
                logger.exception("Chat error")
                if not reply["text"] and reply in self.messages:
                    self.messages.remove(reply)
                apology = dict(new_message("model", CHAT_APOLOGY), local=True)
                self.messages.append(apology)
                return apology
            return reply
        finally:
            self._busy.release()


def build_coach(settings, profile_getter=None):
    if settings.use_backend:
        transport = RelayTransport(base_url=settings.relay_url)
        logger.info("Coaching through relay at %s", settings.relay_url)
    else:
        gemini = GeminiClient(settings.api_key, model=settings.gemini_model)
        transport = DirectTransport(gemini, language=settings.coach_language)
    return CoachClient(transport, profile_getter=profile_getter)
