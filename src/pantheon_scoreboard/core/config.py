"""
Configuration management for the Pantheon scoreboard.

Uses Pydantic settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables prefixed with ``SCOREBOARD_``,
e.g. ``SCOREBOARD_FIRST_YEAR=2023`` or
``SCOREBOARD_PLAYER_ALIASES='{"Alex E.": "Shrimp"}'``.
"""

from functools import lru_cache
from typing import Optional
from urllib.parse import urlsplit

from pydantic import Field, PositiveFloat, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_PLAYER_ALIASES: dict[str, str] = {
    "Alex E.": "Shrimp",
    "Nainoa": "Rat",
    "Isabelle": "Snake",
}


class Settings(BaseSettings):
    """
    Scoreboard settings with environment variable support.

    Passed explicitly into the loaders and the Hall of Fame builder;
    nothing in the package reads these values as global state.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCOREBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # Season layout
    # ==========================================================================
    first_year: int = Field(
        default=2024,
        description="First year splits were tracked (inclusive Hall of Fame bound)",
    )
    data_folder: str = Field(
        default="data",
        description="Folder holding {year}_Split{split}.csv files, relative to base_url",
    )

    # ==========================================================================
    # Transport
    # ==========================================================================
    base_url: str = Field(
        default="http://127.0.0.1:8000",
        description="Web server the CSV files are served from (http/https only)",
    )
    http_timeout: Optional[PositiveFloat] = Field(
        default=None,
        description="Request timeout in seconds; None keeps the httpx default",
    )

    # ==========================================================================
    # Presentation
    # ==========================================================================
    player_aliases: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_PLAYER_ALIASES),
        description="PlayerID -> nickname, applied only when rendering",
    )
    log_level: str = "INFO"

    @field_validator("base_url")
    @classmethod
    def _require_network_scheme(cls, value: str) -> str:
        # CSV files are fetched over the network; file:// paths do not work.
        scheme = urlsplit(value).scheme.lower()
        if scheme not in ("http", "https"):
            raise ValueError(
                f"base_url must be an http(s) URL, got {value!r}. "
                "Serve the data folder with a local web server instead."
            )
        return value.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
