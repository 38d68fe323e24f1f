"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from inspector.crawler.fetcher import GOOGLEBOT_USER_AGENT


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    env: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # API Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_workers: int = 1
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])

    # Fetcher
    fetch_user_agent: str = GOOGLEBOT_USER_AGENT
    fetch_timeout: float = 30.0  # seconds
    fetch_proxy: str | None = None  # e.g. http://127.0.0.1:7890

    # Renderer (Playwright)
    render_enabled: bool = True
    render_timeout_ms: int = 30000  # navigation timeout
    render_settle_ms: int = 2000  # extra wait after network idle
    render_viewport_width: int = 1920
    render_viewport_height: int = 1080

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.env == "production"

    @property
    def is_test(self) -> bool:
        """Check if running in test mode."""
        return self.env == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
