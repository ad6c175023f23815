"""
Application Settings.

All configuration comes from .env / environment variables.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # --- App ---
    env: str = "development"
    debug: bool = True
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"

    # --- Aggregator ---
    parallel_sides: bool = False

    # --- Front parser ---
    birth_year_min: int = 1900
    birth_year_max: int = 2010
    date_guard_before: int = 3
    date_guard_after: int = 15
    max_name_words: int = 6

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    """Settings singleton."""
    return Settings()
