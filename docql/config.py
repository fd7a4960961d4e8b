"""Configuration management for DocQL.

This module provides configuration settings for the DocQL service.
All configuration values can be overridden via environment variables or .env file.

Environment Variables:
    DATABASE_URL: Database connection URL (default: sqlite://, private in-memory store)
    SQL_ECHO: Enable SQL query logging for debugging (default: false)
    SEED_DOCUMENTS: Load the three sample documents into an empty store (default: true)
    HOST: Interface the HTTP server binds to (default: 0.0.0.0)
    PORT: Port the HTTP server listens on (default: 8080)
    LOG_LEVEL: Logging level (default: INFO)
    LOG_FORMAT: Logging format, "plain" or "json" (default: plain)
    ENVIRONMENT: Environment name (default: development)
    DEBUG: Enable debug mode (default: false)
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings for DocQL.

    All configuration values can be set via environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Storage configuration
    database_url: str = "sqlite://"
    sql_echo: bool = False
    seed_documents: bool = True

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8080

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "plain"

    # Environment configuration
    environment: str = "development"
    debug: bool = False

    def get_database_url(self) -> str:
        """Get the database URL."""
        return self.database_url


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    return Settings()
