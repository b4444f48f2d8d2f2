from __future__ import annotations

from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    gemini_api_key: str | None = Field(None, validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"))
    gemini_model: str = Field("gemini-2.5-flash", alias="GEMINI_MODEL")
    coach_language: str = Field("English", alias="COACH_LANGUAGE")

    port: int = Field(3000, alias="PORT")
    host: str = Field("0.0.0.0", alias="HOST")
    cors_origins_raw: str = Field("*", alias="CORS_ORIGINS")
    request_timeout_seconds: int = Field(30, alias="GEMINI_TIMEOUT_SECONDS")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    @property
    def cors_origins(self) -> List[str]:
        origins = [item.strip() for item in self.cors_origins_raw.split(",") if item.strip()]
        return origins or ["*"]


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
