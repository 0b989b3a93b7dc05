"""API route handlers."""

from intent_router.api.routes import cache, classify, health

__all__ = ["cache", "classify", "health"]
