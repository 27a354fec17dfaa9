"""Cache identity and options for the cached-response hook.

The cache key of a request is ``f"{prefix}.{identity_hash(args)}"``.
The hash only depends on the content of the identity arguments: key
order and nesting layout do not matter, but a key set to ``None``
hashes differently from a key that is not there at all.
"""

import json
import uuid
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

from exobase.config import settings
from exobase.entities import Response
from exobase.protocols import HookLogger

NULL_TOKEN = "__null__"
RESPONSE_TAG = "__exobase_response__"


def _identity(args: Any) -> Any:
    return args


def _to_cache(response: Any) -> str:
    if isinstance(response, Response):
        response = {
            RESPONSE_TAG: {
                "status": response.status,
                "headers": dict(response.headers),
                "body": response.body,
            }
        }
    return json.dumps(response)


def _to_response(cached: str) -> Any:
    value = json.loads(cached)
    if isinstance(value, dict) and set(value) == {RESPONSE_TAG}:
        return Response(**value[RESPONSE_TAG])
    return value


@dataclass(frozen=True)
class SkipRule:
    """Bypass the cache when ``header`` equals ``value`` on the request."""

    header: str
    value: str


@dataclass(frozen=True)
class CacheOptions:
    """Configuration of ``use_cached_response``.

    Attributes:
        key: Namespace prefix, unique to the endpoint being cached
        ttl: How long an entry stays fresh (timedelta or seconds)
        logger: Receives hit/miss/failure messages; silent when None
        skipping: Header rule that forces a bypass of the cache
        to_identity: Reduces args to the part that identifies a response
        to_cache: Serializes a result into a string. The default keeps
            the status and headers of a Response result
        to_response: Deserializes a cached string into a response
    """

    key: str
    ttl: timedelta | int = field(default_factory=lambda: timedelta(seconds=settings.cache_ttl))
    logger: HookLogger | None = None
    skipping: SkipRule | None = None
    to_identity: Callable[[Any], Any] = _identity
    to_cache: Callable[[Any], str] = _to_cache
    to_response: Callable[[str], Any] = _to_response

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("CacheOptions.key must not be empty")
        if self.ttl_seconds <= 0:
            raise ValueError(f"CacheOptions.ttl must be positive, got {self.ttl!r}")

    @property
    def ttl_seconds(self) -> int:
        """TTL as the whole number of seconds handed to the backend."""
        if isinstance(self.ttl, timedelta):
            return int(self.ttl.total_seconds())
        return int(self.ttl)


def crush(value: Any, prefix: str = "") -> dict[str, Any]:
    """Flatten nested mappings and lists into a single level dict.

    Example:
        ```python
        crush({"a": {"b": 1}, "c": [1, 2]})
        # {"a.b": 1, "c.0": 1, "c.1": 2}
        ```
    """
    if isinstance(value, Mapping):
        items = ((str(k), v) for k, v in value.items())
    elif isinstance(value, (list, tuple)):
        items = ((str(i), v) for i, v in enumerate(value))
    else:
        return {prefix: value}

    flat: dict[str, Any] = {}
    empty = True
    for name, child in items:
        empty = False
        flat.update(crush(child, f"{prefix}.{name}" if prefix else name))
    if empty and prefix:
        # Keep empty containers visible so {"a": {}} differs from {}
        flat[prefix] = value
    return flat


def identity_hash(args: Any) -> str:
    """Deterministic, order-independent hash of identity arguments."""
    flat = {name: NULL_TOKEN if v is None else v for name, v in crush(args).items()}
    serialized = json.dumps(flat, sort_keys=True, separators=(",", ":"), default=str)
    return str(uuid.uuid5(uuid.NAMESPACE_DNS, serialized))


def cache_key(prefix: str, args: Any) -> str:
    """Full cache key for the given namespace prefix and arguments."""
    return f"{prefix}.{identity_hash(args)}"
