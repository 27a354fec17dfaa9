"""Repository layer for external data access.

Implementations here satisfy the protocols in ``exobase.protocols``
through structural typing, so tests can swap in any object with the
same methods.
"""

from exobase.protocols import CacheBackend

from .redis_cache import RedisCacheBackend

__all__ = [
    "CacheBackend",
    "RedisCacheBackend",
]
