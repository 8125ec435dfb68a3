"""hnclone configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Environment
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # HN API
    hn_api_base_url: str = "https://hacker-news.firebaseio.com/v0"
    hn_max_concurrent_requests: int = 10  # 0 disables the fan-out cap
    hn_request_timeout_seconds: float | None = None

    # Listings
    top_stories_count: int = 30
    stories_refresh_seconds: int = 300

    # Request cache
    cache_dedupe_seconds: float = 2.0

    # Scheduler
    enable_scheduler: bool = True

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
