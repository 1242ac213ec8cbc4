"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from tripmate.app.models.common import ReorderPolicy


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # External generation service
    openai_api_key: SecretStr | None = None
    openai_model: str = "gpt-4o-mini"
    generation_temperature: float = 0.7

    # Timeouts (seconds)
    generation_timeout_s: float = 30.0
    estimate_timeout_s: float = 10.0

    # Ledger
    settlement_epsilon: float = 1e-6

    # Itinerary
    reorder_policy: ReorderPolicy = ReorderPolicy.SWAP_TIMES

    # Links
    maps_base_url: str = "https://www.google.com/maps"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
