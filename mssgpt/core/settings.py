from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="MSSGPT", alias="APP_NAME")
    environment: Literal["local", "dev", "staging", "prod"] = Field(
        default="local", alias="ENVIRONMENT"
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    http_log_level: str = Field(default="WARNING", alias="HTTP_LOG_LEVEL")

    # Read once at startup; a missing key only fails the first provider call.
    openai_api_key: str | None = Field(default=None, alias="OPENAI_API_KEY")
    openai_base_url: str | None = Field(default=None, alias="OPENAI_BASE_URL")
    default_model: str = Field(default="gpt-4o", alias="DEFAULT_MODEL")

    ui_enabled: bool = Field(default=True, alias="UI_ENABLED")
    relay_url: str | None = Field(default=None, alias="RELAY_URL")


@lru_cache
def get_settings() -> Settings:
    return Settings()
