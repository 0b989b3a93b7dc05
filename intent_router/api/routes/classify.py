"""Classification endpoints."""

import logging
import time

from fastapi import APIRouter
from intent_router_contracts import (
    ClassificationResponse,
    ClassifyBatchRequest,
    ClassifyBatchResponse,
    ClassifyRequest,
    EntitiesPayload,
)

from intent_router.api.dependencies import CacheDep, ClassifierDep
from intent_router.inference import Classification, IntentClassifier, generate_cache_key
from intent_router.storage import ResultCache

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(result: Classification, cache_key: str, cached: bool) -> ClassificationResponse:
    """Convert a Classification to the contract model."""
    return ClassificationResponse(
        intent=result.intent,
        destination=result.destination,
        confidence=result.confidence,
        entities=EntitiesPayload(**result.entities.as_dict()),
        normalized_input=result.normalized_input,
        method=result.method,
        cache_key=cache_key,
        cached=cached,
    )


def _classify_one(
    text: str,
    classifier: IntentClassifier,
    cache: ResultCache | None,
) -> ClassificationResponse:
    result = classifier.classify(text)
    cache_key = generate_cache_key(result.normalized_input, result.intent)

    if cache is None:
        return _to_response(result, cache_key, cached=False)

    # Keyed by the resolved intent: a hit means this exact routing decision
    # has been served before and downstream work for it can be reused.
    cached_result = cache.get(cache_key)
    if cached_result is not None:
        return _to_response(cached_result, cache_key, cached=True)

    cache.set(cache_key, result)
    return _to_response(result, cache_key, cached=False)


@router.post("/classify", response_model=ClassificationResponse)
def classify_query(
    request: ClassifyRequest,
    classifier: ClassifierDep,
    cache: CacheDep,
) -> ClassificationResponse:
    """Classify a single search-box query."""
    response = _classify_one(request.text, classifier, cache)
    logger.info(
        "POST /classify: intent=%s destination=%s method=%s cached=%s",
        response.intent,
        response.destination,
        response.method,
        response.cached,
    )
    return response


@router.post("/classify/batch", response_model=ClassifyBatchResponse)
def classify_batch(
    request: ClassifyBatchRequest,
    classifier: ClassifierDep,
    cache: CacheDep,
) -> ClassifyBatchResponse:
    """Classify several queries independently."""
    start_time = time.perf_counter()

    results = [_classify_one(text, classifier, cache) for text in request.texts]

    elapsed_ms = int((time.perf_counter() - start_time) * 1000)
    response = ClassifyBatchResponse(results=results, processing_time_ms=elapsed_ms)
    logger.info(
        "POST /classify/batch: %d queries in %dms, concierge=%d",
        len(results),
        elapsed_ms,
        response.concierge_count,
    )
    return response
