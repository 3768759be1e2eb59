"""
FX Rates API Configuration

API keys are read from the environment (or a local .env file) exactly once,
through get_settings(). See .env.example for the supported variables.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    # === Service Configuration ===
    fx_rates_api_key: str = Field(
        default="",
        description="FX Rates API key, sent as api_key when set"
    )
    fx_rates_api_base_url: str = Field(
        default="https://api.fxratesapi.com",
        description="FX Rates API base URL"
    )
    http_timeout: float = Field(
        default=10.0,
        gt=0,
        description="HTTP timeout in seconds for requests opened by the client"
    )

    # === Logging ===
    log_level: str = Field(default="INFO")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
