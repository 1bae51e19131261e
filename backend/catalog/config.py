"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - Defaults provided for all settings: works out-of-the-box against a local LMS

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
"""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Upstream catalog API
    catalog_api_url: str = "http://localhost:8080/api/v1"
    catalog_timeout_seconds: float = 30.0

    @field_validator("catalog_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # "static" serves the built-in partner schools (company API not deployed yet)
    school_source: Literal["static", "remote"] = "static"

    # Listings
    course_preview_limit: int = 6

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
