from .cache import CacheEntry, CacheStats, ResultCache

__all__ = ["CacheEntry", "CacheStats", "ResultCache"]
