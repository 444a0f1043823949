"""Cache models."""

from k4a.models.cache.disk_cache import CacheError, DiskCache

__all__ = [
    "CacheError",
    "DiskCache",
]
