"""Health check endpoint."""

from fastapi import APIRouter, Request
from intent_router_contracts import HealthResponse

from intent_router import __version__

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check(request: Request) -> HealthResponse:
    """Check that the classifier is loaded."""
    classifier_loaded = hasattr(request.app.state, "classifier")
    cache = getattr(request.app.state, "cache", None)

    return HealthResponse(
        status="ok" if classifier_loaded else "degraded",
        version=__version__,
        cache_enabled=cache is not None,
    )
