"""Test fixtures for the intent router."""

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from intent_router import __version__
from intent_router.api.routes import cache, classify, health
from intent_router.config.settings import Settings
from intent_router.inference import IntentClassifier
from intent_router.storage import ResultCache


class FakeClock:
    """Manually advanced clock for deterministic TTL tests."""

    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def classifier() -> IntentClassifier:
    return IntentClassifier()


@pytest.fixture
def settings() -> Settings:
    return Settings(cache_enabled=True, cache_ttl_seconds=60, cache_max_entries=3)


@pytest.fixture
def result_cache(settings: Settings, clock: FakeClock) -> ResultCache:
    return ResultCache(
        ttl_seconds=settings.cache_ttl_seconds,
        max_entries=settings.cache_max_entries,
        clock=clock,
    )


def _build_app(settings: Settings, cache_instance: ResultCache | None) -> FastAPI:
    # Create app without lifespan to control state directly
    app = FastAPI(title="Intent Router (Test)", version=__version__)

    app.include_router(health.router)
    app.include_router(classify.router)
    app.include_router(cache.router)

    app.state.settings = settings
    app.state.classifier = IntentClassifier.from_settings(settings)
    app.state.cache = cache_instance
    return app


@pytest.fixture
def test_client(
    settings: Settings,
    result_cache: ResultCache,
) -> Generator[TestClient, None, None]:
    """Create a test client with a small, fake-clocked cache."""
    app = _build_app(settings, result_cache)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def uncached_client() -> Generator[TestClient, None, None]:
    """Create a test client with caching disabled."""
    settings = Settings(cache_enabled=False)
    app = _build_app(settings, None)
    with TestClient(app) as client:
        yield client
