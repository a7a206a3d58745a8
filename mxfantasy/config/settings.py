"""Application settings using pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """League settings, overridable from MXF_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MXF_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Race data
    results_path: str = "results.txt"

    # Game setup
    player_count: int = Field(default=3, ge=1)
    podium_size: int = Field(default=3, ge=1)

    # Feature flags
    debug: bool = False

    @property
    def results_file(self) -> Path:
        """Get results path as Path object."""
        return Path(self.results_path)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
