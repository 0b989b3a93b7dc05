"""Deterministic query-intent routing for the supplement search box."""

from intent_router.inference import (
    Classification,
    EntityBundle,
    IntentClassifier,
    classify,
    generate_cache_key,
    normalize,
)
from intent_router.storage import ResultCache

__version__ = "0.1.0"

__all__ = [
    "Classification",
    "EntityBundle",
    "IntentClassifier",
    "ResultCache",
    "__version__",
    "classify",
    "generate_cache_key",
    "normalize",
]
