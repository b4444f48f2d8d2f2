from __future__ import annotations

from typing import Optional, List

from pydantic import BaseModel, ConfigDict


class ProfileContext(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    role: Optional[str] = None
    goal: Optional[str] = None
    note: Optional[str] = None


class HistoryItem(BaseModel):
    role: str = "user"
    text: str = ""


class ChatRequest(BaseModel):
    message: str
    profile: Optional[ProfileContext] = None
    mode: str = "chat"
    history: List[HistoryItem] = []


class ChatReply(BaseModel):
    reply: str


class ErrorReply(BaseModel):
    error: str
