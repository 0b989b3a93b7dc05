"""Result cache inspection contracts."""

from pydantic import BaseModel, Field


class CacheStatsResponse(BaseModel):
    enabled: bool
    entries: int = Field(..., ge=0)
    hits: int = Field(..., ge=0)
    misses: int = Field(..., ge=0)
    hit_rate: float = Field(..., ge=0.0, le=1.0)
    max_entries: int = Field(..., ge=0)
    ttl_seconds: float = Field(..., ge=0.0)


class ClearCacheResponse(BaseModel):
    cleared: int = Field(..., ge=0)
