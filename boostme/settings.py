from __future__ import annotations

import os

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DB_PATH = os.path.join(os.path.dirname(__file__), "..", "boostme.db")


class AppSettings(BaseSettings):
    database_url: str = Field(f"sqlite:///{DB_PATH}", alias="BOOSTME_DATABASE_URL")

    # True routes every coaching call through the relay (backend/main.py).
    use_backend: bool = Field(False, alias="USE_BACKEND")
    relay_url: str = Field("http://localhost:3000", alias="RELAY_URL")
    relay_timeout_seconds: int = Field(30, alias="RELAY_TIMEOUT_SECONDS")

    api_key: str | None = Field(None, validation_alias=AliasChoices("API_KEY", "GEMINI_API_KEY"))
    gemini_model: str = Field("gemini-2.5-flash", alias="GEMINI_MODEL")
    coach_language: str = Field("English", alias="COACH_LANGUAGE")

    reminder_interval_seconds: int = Field(60, alias="REMINDER_INTERVAL_SECONDS")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)


_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings
