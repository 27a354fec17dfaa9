import os
from dataclasses import dataclass
from functools import lru_cache

import redis.asyncio as redis
from dotenv import load_dotenv

load_dotenv()

DEFAULT_LOG_FORMAT = "[:method] :path at :date(iso) -> :status in :elapsed(ms, ms)"


@dataclass(frozen=True)
class Settings:
    """Library defaults loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Cache
    cache_ttl: int = int(os.getenv("EXOBASE_CACHE_TTL", "3600"))  # 1 hour default

    # Access logging
    log_format: str = os.getenv("EXOBASE_LOG_FORMAT", DEFAULT_LOG_FORMAT)

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_ttl <= 0:
            raise ValueError(f"EXOBASE_CACHE_TTL must be a positive number of seconds, got {self.cache_ttl}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create an asyncio Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )
