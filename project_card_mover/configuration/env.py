"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # Webhook server settings
    HOST: str = "0.0.0.0"
    PORT: int = 3030

    # GitHub API settings
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_TOKEN: str | None = None
