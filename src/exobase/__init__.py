"""exobase - runtime-agnostic request handling with composable hooks.

Layers:
    - entities: Request, Props, Response, LogToken (frozen dataclasses)
    - errors: JsonError variants and the error() factory
    - protocols: Interface contracts (CacheBackend, HookLogger, Hook)
    - pipeline: compose(), Pipeline and response normalization
    - matching: Path pattern matching
    - logs: Log format tokenizer and renderer
    - caching: Cache identity hashing and options
    - hooks: use_* hooks wrapping handlers
    - repositories: Redis cache backend
    - api: FastAPI adapter

Usage:
    ```python
    from exobase import Pipeline, Props, Request
    from exobase.hooks import use_path_params

    async def find_item(props):
        return {"id": props.args["id"]}

    endpoint = Pipeline([use_path_params("/items/{id}")], find_item)
    response = await endpoint(Props(request=Request(path="/items/42")))
    ```
"""

from exobase.config import get_settings, settings
from exobase.entities import LogToken, Props, Request, Response, default_response
from exobase.errors import (
    ErrorKind,
    JsonError,
    NotAuthenticatedError,
    NotFoundError,
    ResponseError,
    RouteMismatchError,
    ServiceResolutionError,
    ValidationError,
    error,
)
from exobase.pipeline import Pipeline, compose, hook, response_from_error, response_from_result
from exobase.protocols import CacheBackend, Handler, Hook, HookLogger, StdLogger

__all__ = [
    # Configuration
    "settings",
    "get_settings",
    # Entities
    "LogToken",
    "Props",
    "Request",
    "Response",
    "default_response",
    # Errors
    "ErrorKind",
    "JsonError",
    "NotAuthenticatedError",
    "NotFoundError",
    "ResponseError",
    "RouteMismatchError",
    "ServiceResolutionError",
    "ValidationError",
    "error",
    # Composition
    "Pipeline",
    "compose",
    "hook",
    "response_from_error",
    "response_from_result",
    # Protocols
    "CacheBackend",
    "Handler",
    "Hook",
    "HookLogger",
    "StdLogger",
]
