"""Library configuration using Pydantic settings."""

import math
from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from MAZEMAP_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MAZEMAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Pacing
    pause_time: float = 0.0  # seconds the caller waits before drawing each mark

    # Parsing
    max_maze_size: Optional[int] = None  # squares along either axis; unlimited when unset
    maze_file_encoding: str = "utf-8"
    default_maze_file: Optional[str] = None

    @field_validator("pause_time")
    @classmethod
    def validate_pause_time(cls, v: float) -> float:
        """Reject negative or non-finite pause times."""
        if not math.isfinite(v) or v < 0:
            raise ValueError("PAUSE_TIME must be a non-negative number of seconds")
        return v

    @field_validator("max_maze_size")
    @classmethod
    def validate_max_maze_size(cls, v: Optional[int]) -> Optional[int]:
        """Require a positive size limit when one is given."""
        if v is not None and v <= 0:
            raise ValueError("MAX_MAZE_SIZE must be positive")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
