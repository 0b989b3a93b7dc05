"""Intent router API contracts.

Request and response models shared between the intent router service and
the web frontend that calls it.
"""

from intent_router_contracts.cache import CacheStatsResponse, ClearCacheResponse
from intent_router_contracts.classify import (
    MAX_BATCH_SIZE,
    MAX_TEXT_LENGTH,
    ClassificationResponse,
    ClassifyBatchRequest,
    ClassifyBatchResponse,
    ClassifyRequest,
    ConfidenceLevel,
    Destination,
    EntitiesPayload,
    IntentType,
    MethodType,
)
from intent_router_contracts.health import HealthResponse

__all__ = [
    # Classification
    "ClassifyRequest",
    "ClassifyBatchRequest",
    "ClassificationResponse",
    "ClassifyBatchResponse",
    "EntitiesPayload",
    "IntentType",
    "Destination",
    "ConfidenceLevel",
    "MethodType",
    "MAX_BATCH_SIZE",
    "MAX_TEXT_LENGTH",
    # Cache
    "CacheStatsResponse",
    "ClearCacheResponse",
    # Health
    "HealthResponse",
]
