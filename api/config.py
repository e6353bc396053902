"""Environment-driven settings for the Race Radar API."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ROOT_DIR = Path(__file__).parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    eventbrite_token: str | None = None
    host: str = "0.0.0.0"
    port: int = 3000
    public_dir: Path = ROOT_DIR / "public"
    mock_events_path: Path = Path(__file__).parent / "data" / "mock_races.json"
    http_timeout: float = 30.0
    log_level: Literal["critical", "error", "warning", "info", "debug", "trace"] = "info"

    @field_validator("log_level", mode="before")
    @classmethod
    def _lower_log_level(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value

    @property
    def live(self) -> bool:
        """True when a provider credential is configured."""
        return bool(self.eventbrite_token)


@lru_cache
def get_settings() -> Settings:
    return Settings()
