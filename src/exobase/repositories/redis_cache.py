"""Redis implementation of CacheBackend.

Values are stored as plain strings with a per-key expiry (``SET key
value EX ttl``). It satisfies the CacheBackend protocol.
"""

import redis.asyncio as redis

from exobase.config import get_redis_client


class RedisCacheBackend:
    """Redis string store used by ``use_cached_response``.

    This class satisfies the CacheBackend protocol through structural
    typing - no explicit inheritance needed. Errors raised by the client
    are left to propagate; the cache hook decides how to degrade.
    """

    def __init__(self, redis_client: redis.Redis | None = None, namespace: str = "") -> None:
        """Initialize the Redis cache backend.

        Args:
            redis_client: asyncio Redis client. If None, creates default.
            namespace: Optional prefix prepended to every key, e.g. "api:"
        """
        self._client = redis_client or get_redis_client()
        self._namespace = namespace

    @classmethod
    def create(cls, namespace: str = "") -> "RedisCacheBackend":
        """Factory method to create RedisCacheBackend from settings.

        Args:
            namespace: Optional key prefix.

        Returns:
            Configured RedisCacheBackend
        """
        return cls(namespace=namespace)

    def _key(self, key: str) -> str:
        return f"{self._namespace}{key}"

    async def get(self, key: str) -> str | None:
        """Read a cached value.

        Args:
            key: The cache key

        Returns:
            The stored string, or None if absent or expired
        """
        value = await self._client.get(self._key(key))
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str, ttl: int) -> None:
        """Store a value with an expiry.

        Args:
            key: The cache key
            value: Serialized value
            ttl: Time-to-live in seconds
        """
        await self._client.set(self._key(key), value, ex=ttl)

    async def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(await self._client.ping())
        except redis.RedisError:
            return False

    async def close(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
