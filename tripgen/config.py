"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Generative endpoint (proxy in front of the text model)
    generative_api_url: str = "https://us-central1-your-project-id.cloudfunctions.net/geminiProxy"

    # Cache / shared limiter state
    redis_url: str | None = None

    # Rate limiting (fixed window)
    rate_limit_requests: int = 10
    rate_limit_window_ms: int = 60_000
    rate_limit_key_length: int = 16

    # Synthetic field generation; None means unseeded
    rng_seed: int | None = None

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
