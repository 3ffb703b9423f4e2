"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment (prefix ``PANTOPODA_``).

    Attributes:
        project_name: Display name used in the default User-Agent.
        version: Current package version string.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        user_agent: User-Agent sent by the client unless a request sets one.
        messages_path: Optional JSON file of validation messages.
    """

    model_config = SettingsConfigDict(
        env_prefix="PANTOPODA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    project_name: str = "pantopoda"
    version: str = "0.1.0"
    log_level: str = "INFO"
    user_agent: Optional[str] = None
    messages_path: Optional[str] = None

    def get_user_agent(self) -> str:
        """Return the effective User-Agent header value."""
        if self.user_agent:
            return self.user_agent
        return f"{self.project_name}/{self.version}"


settings = Settings()
