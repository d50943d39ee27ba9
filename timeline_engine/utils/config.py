"""Configuration management using Pydantic Settings."""

import os
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    # App Configuration
    environment: str = "development"
    log_level: str = "INFO"

    # Schedule recomputation
    inter_stop_gap_minutes: int = 15
    default_dwell_minutes: int = 45

    # Travel summaries
    walking_speed_kmh: float = 4.0

    class Config:
        """Pydantic configuration."""
        env_file = os.path.join(os.path.dirname(__file__), "..", "..", ".env")
        env_prefix = "TIMELINE_"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
