"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
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
    env: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # API Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])
    max_html_bytes: int = 5 * 1024 * 1024  # Largest document accepted by /v1/analyze

    # Content analyzer (all checks on by default)
    analyzer_check_answer_placement: bool = True
    analyzer_check_fact_density: bool = True
    analyzer_check_heading_structure: bool = True
    analyzer_check_eeat: bool = True
    analyzer_check_snippability: bool = True
    analyzer_check_schema: bool = True

    # AI crawler detection
    bot_detection_enabled: bool = True
    bot_detection_verbose: bool = False
    additional_bots: list[str] = Field(default_factory=list)
    ignore_bots: list[str] = Field(default_factory=list)
    optimize_bot_responses: bool = False  # Serve stripped-down HTML to AI crawlers

    # Generators
    site_url: str | None = None  # Used for the served robots.txt sitemap line
    llms_fetch_timeout_seconds: float = 5.0
    user_agent: str = "aivisibility/0.1.0 (llms.txt generator)"

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.env == "production"

    @property
    def is_test(self) -> bool:
        """Check if running in test mode."""
        return self.env == "test"

    @property
    def sitemap_url(self) -> str | None:
        if not self.site_url:
            return None
        return f"{self.site_url.rstrip('/')}/sitemap.xml"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
