from __future__ import annotations

import os
from functools import lru_cache
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    """Runtime configuration resolved from environment variables."""

    gemini_api_key: Optional[str] = Field(
        default=None, alias="GEMINI_API_KEY", description="Google Gemini API key"
    )
    reply_llm_model: str = Field(
        default="gemini-2.5-flash",
        alias="REPLY_LLM_MODEL",
        description="Generative model used to write sarcastic replies.",
    )
    gemini_request_timeout: Optional[float] = Field(
        default=None,
        alias="GEMINI_REQUEST_TIMEOUT",
        description="Optional request timeout (seconds) passed to the Gemini SDK.",
    )
    cors_allow_origins: str = Field(
        default="*",
        alias="CORS_ALLOW_ORIGINS",
        description="Comma-separated list of origins allowed to call the API.",
    )
    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Root logging level.",
    )

    model_config = {"populate_by_name": True}

    @field_validator("gemini_api_key", "gemini_request_timeout", mode="before")
    @classmethod
    def _blank_as_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]

    @classmethod
    def from_env(cls) -> "Settings":
        return cls.model_validate(os.environ)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance built from environment variables."""
    return Settings.from_env()
