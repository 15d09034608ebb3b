"""Application configuration using Pydantic V2."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings and configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BRICKSET_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="brickset-stats", description="Application name")

    # Logging
    # Kept at WARNING so the report on stdout is not buried in progress logs
    log_level: str = Field(default="WARNING", description="Logging level")

    # Data
    data_file: Path = Field(
        default_factory=lambda: Path(__file__).parent.parent / "resources" / "brickset.json",
        description="JSON array of LEGO sets",
    )

    # Demonstration report parameters
    demo_tag: str = Field(default="Microscale", description="Tag counted in the report")
    demo_theme: str = Field(default="Bionicle", description="Theme averaged in the report")
    piece_range_low: int = Field(default=100, ge=0, description="Lower piece bound (inclusive)")
    piece_range_high: int = Field(default=500, ge=0, description="Upper piece bound (inclusive)")
    name_initial: str = Field(default="B", min_length=1, description="Initial letter filter")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached accessor to avoid reparsing .env on every call."""
    return Settings()
