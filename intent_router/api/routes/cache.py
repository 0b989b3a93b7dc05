"""Result cache inspection endpoints."""

import logging

from fastapi import APIRouter
from intent_router_contracts import CacheStatsResponse, ClearCacheResponse

from intent_router.api.dependencies import CacheDep

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/cache/stats", response_model=CacheStatsResponse)
def cache_stats(cache: CacheDep) -> CacheStatsResponse:
    if cache is None:
        return CacheStatsResponse(
            enabled=False,
            entries=0,
            hits=0,
            misses=0,
            hit_rate=0.0,
            max_entries=0,
            ttl_seconds=0.0,
        )

    stats = cache.stats()
    return CacheStatsResponse(
        enabled=True,
        entries=stats.entries,
        hits=stats.hits,
        misses=stats.misses,
        hit_rate=stats.hit_rate,
        max_entries=stats.max_entries,
        ttl_seconds=stats.ttl_seconds,
    )


@router.delete("/cache", response_model=ClearCacheResponse)
def clear_cache(cache: CacheDep) -> ClearCacheResponse:
    cleared = cache.clear() if cache is not None else 0
    logger.info("DELETE /cache: cleared=%d", cleared)
    return ClearCacheResponse(cleared=cleared)
