"""FastAPI application with lifespan management."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from intent_router import __version__
from intent_router.config.settings import Settings, get_settings
from intent_router.inference import IntentClassifier
from intent_router.storage import ResultCache


def configure_logging() -> None:
    """Configure logging for the intent router service."""
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Set level for our package specifically
    logging.getLogger("intent_router").setLevel(log_level)

    # Quiet noisy third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


configure_logging()
logger = logging.getLogger(__name__)


def _log_settings(settings: Settings) -> None:
    """Log current settings for debugging."""
    logger.info("=" * 60)
    logger.info("Intent Router Configuration")
    logger.info("=" * 60)
    logger.info("  Log level: %s", settings.log_level)
    logger.info("  Format heuristic:")
    logger.info("    Short query max length: %d", settings.short_query_max_length)
    logger.info("    Long query min length: %d", settings.long_query_min_length)
    logger.info("  Result cache:")
    logger.info("    Enabled: %s", settings.cache_enabled)
    if settings.cache_enabled:
        logger.info("    TTL: %.0fs", settings.cache_ttl_seconds)
        logger.info("    Max entries: %d", settings.cache_max_entries)
    logger.info("=" * 60)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Build the classifier and cache at startup, drop them at shutdown."""
    settings = get_settings()
    _log_settings(settings)

    app.state.settings = settings
    app.state.classifier = IntentClassifier.from_settings(settings)
    app.state.cache = (
        ResultCache(
            ttl_seconds=settings.cache_ttl_seconds,
            max_entries=settings.cache_max_entries,
        )
        if settings.cache_enabled
        else None
    )

    logger.info("Intent router ready - tiers: %s", ", ".join(app.state.classifier.tier_names))
    yield

    logger.info("Shutting down")
    if app.state.cache is not None:
        app.state.cache.clear()
    del app.state.cache
    del app.state.classifier


def create_app() -> FastAPI:
    """Create FastAPI application."""
    from intent_router.api.routes import cache, classify, health

    app = FastAPI(
        title="Intent Router",
        description="Deterministic search-vs-concierge routing for search-box queries",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(health.router, tags=["health"])
    app.include_router(classify.router, tags=["classification"])
    app.include_router(cache.router, tags=["cache"])

    return app


# For uvicorn
app = create_app()
