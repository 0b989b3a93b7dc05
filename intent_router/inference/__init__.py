"""Inference entry points.

- IntentClassifier / classify: route a query to search or concierge
- generate_cache_key: key for post-classification cache entries
- Pipeline components (tiers, extractors) are re-exported for evaluation
"""

from __future__ import annotations

from .classification import (
    Classification,
    EntityBundle,
    EntityExtractor,
    IntentClassifier,
    QueryContext,
    build_tiers,
    classify,
    generate_cache_key,
    normalize,
)

__all__ = [
    "Classification",
    "EntityBundle",
    "EntityExtractor",
    "IntentClassifier",
    "QueryContext",
    "build_tiers",
    "classify",
    "generate_cache_key",
    "normalize",
]
