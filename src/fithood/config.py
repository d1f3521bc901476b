"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from fithood.adapters.fatsecret_client import DEFAULT_API_URL, DEFAULT_TOKEN_URL

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    fatsecret_client_id: str | None = None
    fatsecret_client_secret: str | None = None
    fatsecret_token_url: str = DEFAULT_TOKEN_URL
    fatsecret_api_url: str = DEFAULT_API_URL
    csv_day_first: bool = True
    log_level: str = "INFO"
    app_name: str = "fithood"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def food_search_enabled(self) -> bool:
        """Return True when FatSecret credentials are configured."""
        return bool(self.fatsecret_client_id and self.fatsecret_client_secret)
