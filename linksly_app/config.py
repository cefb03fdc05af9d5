from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Application
    app_name: str = "Linksly URL Shortener"
    app_version: str = "1.0.0"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Database
    database_url: str = "sqlite:///./linksly.db"

    # Public prefix used to build short URLs and QR payloads
    base_url: str = "http://127.0.0.1:8000"

    # Origins allowed to call the API from a browser (JSON list in the env)
    cors_origins: List[str] = ["*"]

    # Short code generation
    short_code_strategy: str = "urlsafe"  # Options: "urlsafe", "base62"
    short_code_length: int = 8
    max_retries: int = 5
    min_alias_length: int = 3

    # Listing
    default_page_size: int = 10
    max_page_size: int = 100
    recent_clicks_limit: int = 100  # Clicks embedded in link details

    # Analytics
    recent_clicks_days: int = 7
    top_links_limit: int = 5

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
