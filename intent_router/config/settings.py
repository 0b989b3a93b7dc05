from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ._utils import resolve_env_file_path


class Settings(BaseSettings):
    """Intent router configuration."""

    log_level: str = "INFO"

    # Result cache (in-memory, per process)
    cache_enabled: bool = True
    cache_ttl_seconds: float = Field(default=3600.0, gt=0)
    cache_max_entries: int = Field(default=10_000, ge=1)

    # Format heuristic thresholds, counted in code points of the normalized query
    short_query_max_length: int = Field(default=10, ge=0)
    long_query_min_length: int = Field(default=30, ge=1)

    model_config = SettingsConfigDict(
        env_file=resolve_env_file_path(),
        env_file_encoding="utf-8",
        env_prefix="INTENT_ROUTER_",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
