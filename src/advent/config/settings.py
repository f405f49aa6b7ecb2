"""Environment-driven settings.

Values are loaded from environment variables (prefix ``ADVENT_``) or a
``.env`` file in the working directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runner and CLI configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ADVENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path = Path("data")
    """Directory holding the puzzle inputs as ``dayNN.txt``."""
    answers_file: Path | None = None
    """Optional JSON file of expected answers: ``{"1": [p1, p2], ...}``."""
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    slow_day_ms: float = Field(default=5_000.0, ge=0.0)
    """Parts slower than this are logged with a warning."""


# Module-level singleton, import and use directly.
settings = Settings()


def get_settings() -> Settings:
    """Return the module-level Settings singleton."""
    return settings
