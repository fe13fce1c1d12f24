"""
Application settings.

Values come from environment variables (or a local ``.env`` file). Bluesky
credentials are only required when actually posting.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the bot."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "macaulay-bot"
    app_env: str = "development"
    debug: bool = False

    # Reference data (flat CSV exports, relative to the working directory)
    data_dir: Path = Path("data")
    bird_csv: str = "avilist2025_spp_filtered.csv"
    mammal_csv: str = "mdd2.3_spp_filtered.csv"

    # Bluesky
    bluesky_service: str = "https://bsky.social"
    bluesky_username: str | None = None
    bluesky_password: SecretStr | None = None

    # Network behaviour
    retry_delay_seconds: float = Field(default=5.0, ge=0)

    @property
    def bird_csv_path(self) -> Path:
        return self.data_dir / self.bird_csv

    @property
    def mammal_csv_path(self) -> Path:
        return self.data_dir / self.mammal_csv


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (read once)."""
    return Settings()
