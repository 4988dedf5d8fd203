"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from src.chess.layout import STARTING_LAYOUT


class Settings(BaseSettings):
    """Settings loaded from environment variables (prefixed with CHESSBOARD_) or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="CHESSBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Position the registry is initialized with
    starting_layout: str = STARTING_LAYOUT

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
