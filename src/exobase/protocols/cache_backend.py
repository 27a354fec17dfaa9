"""Cache backend protocol.

Defines the interface the cached-response hook talks to. Both methods
are expected to fail now and then (network errors, timeouts); callers
must tolerate that.

Implementations can include:
- Redis (``exobase.repositories.RedisCacheBackend``)
- Memcached
- An in-process dict for tests
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CacheBackend(Protocol):
    """Protocol for key/value cache backends.

    Example:
        ```python
        from exobase.repositories import RedisCacheBackend

        cache: CacheBackend = RedisCacheBackend.create()
        ```
    """

    async def get(self, key: str) -> str | None:
        """Read a cached value.

        Args:
            key: The cache key

        Returns:
            The stored string, or None if absent or expired
        """
        ...

    async def set(self, key: str, value: str, ttl: int) -> None:
        """Store a value.

        Args:
            key: The cache key
            value: The serialized value
            ttl: Seconds until the value should be considered stale
        """
        ...
