"""Application configuration using Pydantic settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = True

    # API
    api_v1_prefix: str = "/api/v1"
    project_name: str = "Orders Dashboard"
    version: str = "1.0.0"

    # Search index (empty connection string means sample data)
    search_connection_string: str = ""
    search_api_key: str = ""
    search_orders_index_name: str = "orders"
    search_api_version: str = "2023-11-01"
    search_page_size: int = 1000
    search_timeout_seconds: float = 30.0

    # Error tracking
    sentry_dsn: str = ""

    # Rate limiting
    rate_limit_default: str = "120/minute"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    @property
    def uses_search_index(self) -> bool:
        """Whether a search index connection is configured."""
        return bool(self.search_connection_string.strip())


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
