"""
Application settings loaded from environment variables.
It centralizes the client identity and web fallback host used when building ride deeplinks.
Keeping these values in one typed model lets every entrypoint agree on defaults.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Final

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

VALID_SOURCES: Final[tuple[str, ...]] = ("button", "deeplink")


class Settings(BaseModel):
    """Typed runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    RIDES_CLIENT_ID: str | None = None
    RIDES_WEB_HOST: str = "m.uber.com"
    RIDES_SDK_VERSION: str = "0.1.0"
    RIDES_DEEPLINK_SOURCE: str = "deeplink"
    LOG_LEVEL: str = "INFO"

    @field_validator("RIDES_CLIENT_ID")
    @classmethod
    def blank_client_id_is_missing(cls, value: str | None) -> str | None:
        if value is None or value.strip() == "":
            return None
        return value.strip()

    @field_validator("RIDES_WEB_HOST")
    @classmethod
    def validate_web_host(cls, value: str) -> str:
        host = value.strip()
        if not host:
            raise ValueError("RIDES_WEB_HOST must not be empty.")
        if "://" in host or "/" in host:
            raise ValueError(f"RIDES_WEB_HOST must be a bare host name, got {value!r}.")
        return host

    @field_validator("RIDES_DEEPLINK_SOURCE")
    @classmethod
    def validate_source(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in VALID_SOURCES:
            raise ValueError(f"RIDES_DEEPLINK_SOURCE must be one of {list(VALID_SOURCES)}, got {value!r}.")
        return normalized


def load_settings(*, load_env: bool = True) -> Settings:
    """Load and validate environment settings from `.env` and process environment."""

    if load_env:
        load_dotenv()

    try:
        return Settings.model_validate(dict(os.environ))
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached accessor for application settings."""

    return load_settings()
