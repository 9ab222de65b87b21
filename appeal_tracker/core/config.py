"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        database_url: SQLAlchemy URL of the appeals store.
        database_echo: Log every SQL statement.
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on (env PORT).
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_heavy: Rate limit for administrative bulk endpoints.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Appeal Tracker"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    database_url: str = "sqlite:///./appeals.db"
    database_echo: bool = False

    host: str = "0.0.0.0"
    port: int = 8080

    rate_limit_default: str = "60/minute"
    rate_limit_heavy: str = "10/minute"


settings = Settings()
