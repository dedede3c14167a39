"""Application configuration helpers."""

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    """Runtime configuration read from environment variables."""

    app_name: str = Field(default="randomuser-proxy")
    environment: str = Field(default="local")
    log_level: str = Field(default="INFO")

    # Listener settings
    host: str = Field(default="0.0.0.0")
    port: int = Field(
        default=3000,
        validation_alias=AliasChoices("PORT", "RANDOMUSER_PROXY_PORT"),
    )

    # Upstream RandomUser API
    randomuser_url: str = Field(default="https://randomuser.me/api/")
    randomuser_timeout: float | None = Field(default=None)

    model_config = SettingsConfigDict(
        env_prefix="RANDOMUSER_PROXY_",
        case_sensitive=False,
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        frozen=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings object so the environment is only read once."""

    return Settings()
