"""
secstore configuration - loaded from environment (SECSTORE_*).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="SECSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Persistent registry
    database_url: str = "sqlite:///secstore.db"
    database_echo: bool = False

    # Replay "added" for every record loaded at startup
    notify_on_hydration: bool = True

    log_level: str = "INFO"


settings = Settings()


def get_settings() -> Settings:
    """Return application settings (for dependency injection)."""
    return settings
