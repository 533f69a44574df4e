"""Short-lived caching for league views."""

from .ttl_cache import TTLCache, cache_key

__all__ = ["TTLCache", "cache_key"]
