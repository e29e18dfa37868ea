from __future__ import annotations

import logging
import os
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    HOST: str = "0.0.0.0"
    PORT: int = 3001

    # Comma-separated, e.g. "http://localhost:5176,https://admin.example.com"
    CLIENT_ORIGIN: str = "http://localhost:5176"

    # Empty means "not configured"; the request path refuses instead of allowing.
    GEMINI_API_KEY: str = ""
    ADMIN_EMAIL: str = ""
    SUPABASE_JWT_SECRET: str = ""

    JWT_AUDIENCE: str = ""

    GEMINI_ENDPOINT_TEMPLATE: str = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
    GEMINI_MODEL: str = "gemini-1.5-flash"

    GEMINI_TIMEOUT_SEC: float = 600

    REWRITE_TEMPERATURE: float = 0.6
    REWRITE_LANGUAGE: str = "French"

    # The original deployment mounted routes under "/api".
    API_PREFIX: str = ""

    # Request bodies above this are refused with 413.
    MAX_BODY_BYTES: int = 1024 * 1024

    @field_validator("ADMIN_EMAIL")
    @classmethod
    def _normalize_admin_email(cls, v: str) -> str:
        return (v or "").strip().lower()

    @property
    def JWT_ALGORITHM(self) -> str:
        return "HS256"

    @property
    def allowed_origins(self) -> List[str]:
        return [o.strip() for o in self.CLIENT_ORIGIN.split(",") if o.strip()]

    @property
    def gemini_url(self) -> str:
        return self.GEMINI_ENDPOINT_TEMPLATE.format(model=self.GEMINI_MODEL)


S = Settings()

logger = logging.getLogger("uvicorn.error")
logger.setLevel(os.getenv("REWRITE_LOG_LEVEL", "INFO").upper())
