from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from backend.schemas import ChatReply, ChatRequest, ErrorReply
from backend.settings import get_settings
from boostme.services import prompts
from boostme.services.gemini import GeminiClient

logger = logging.getLogger(__name__)

router = APIRouter()


def get_gemini_client() -> GeminiClient:
    settings = get_settings()
    return GeminiClient(
        settings.gemini_api_key,
        model=settings.gemini_model,
        timeout=settings.request_timeout_seconds,
    )


@router.post("/chat", response_model=ChatReply, responses={500: {"model": ErrorReply}})
async def chat(payload: ChatRequest, client: GeminiClient = Depends(get_gemini_client)):
    settings = get_settings()
    mode = payload.mode if payload.mode in prompts.MODES else "chat"
    profile = payload.profile.model_dump() if payload.profile else None

    if mode == "chat":
        history = [item.model_dump() for item in payload.history]
        reply = await client.agenerate(
            prompts.build_contents(payload.message, history),
            system_instruction=prompts.system_instruction(profile, "chat", settings.coach_language),
        )
    else:
        reply = await client.agenerate(
            prompts.build_prompt(mode, payload.message, profile, settings.coach_language),
            schema=prompts.response_schema(mode),
        )
    logger.info("Relayed %s reply (%d chars)", mode, len(reply))
    return {"reply": reply}
