"""Application configuration using Pydantic Settings."""

from functools import lru_cache

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

    # Provider credentials
    pexels_api_key: str = Field(default="", description="Pexels API key (photos and videos)")
    unsplash_access_key: str = Field(default="", description="Unsplash access key (photos)")
    pixabay_api_key: str = Field(default="", description="Pixabay API key (photos and videos)")

    # Upstream HTTP
    http_timeout: float = Field(default=15.0, description="Upstream request timeout in seconds")

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3000, description="Bind port")
    base_url: str | None = Field(default=None, description="Public base URL echoed to the UI")

    # Application Configuration
    app_title: str = Field(default="Stock Media Proxy", description="Application title")
    app_version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    log_json: bool = Field(default=True, description="Use JSON log format")
    log_file: str | None = Field(default=None, description="Optional log file path")

    def provider_status(self) -> dict[str, bool]:
        """Report which providers have a credential configured."""
        return {
            "pexels": bool(self.pexels_api_key),
            "unsplash": bool(self.unsplash_access_key),
            "pixabay": bool(self.pixabay_api_key),
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
