from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .dhv_fetcher import DEFAULT_API_URL

load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    api_url: str = Field(DEFAULT_API_URL, alias="XCRANK_API_URL")
    timeout: Optional[float] = Field(None, alias="XCRANK_TIMEOUT")
    log_level: str = Field("WARNING", alias="XCRANK_LOG_LEVEL")
    log_file: Optional[str] = Field(None, alias="XCRANK_LOG_FILE")

    @field_validator("api_url")
    @classmethod
    def _url_http(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("XCRANK_API_URL must be an http(s) URL")
        return v

    @field_validator("timeout")
    @classmethod
    def _timeout_positive(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("XCRANK_TIMEOUT must be greater than 0")
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown XCRANK_LOG_LEVEL: {v}")
        return level

    @field_validator("log_file", mode="before")
    @classmethod
    def _empty_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


@lru_cache()
def get_settings() -> Settings:
    """Return application settings loaded from the environment."""
    return Settings()  # type: ignore[call-arg]


__all__ = ["Settings", "get_settings"]
