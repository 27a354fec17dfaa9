"""Hooks: reusable transforms wrapped around a handler.

Each hook is an object with ``wrap(func) -> func`` created by a
``use_*`` factory. Hooks that contribute data return a new Props via
``Props.merge``; hooks that reject a request raise a ``JsonError``.

Usage:
    ```python
    from exobase.pipeline import Pipeline
    from exobase.hooks import use_api_key, use_cached_response, use_path_params

    endpoint = Pipeline(
        [
            use_api_key("secret"),
            use_path_params("/v1/items/{id}"),
            use_cached_response(key="items.find", ttl=300),
        ],
        find_item,
    )
    ```
"""

from .access_log import LoggingHook, use_logging
from .api_key import ApiKeyHook, use_api_key
from .arguments import JsonBodyHook, QueryArgsHook, use_json_body, use_query_args
from .basic_auth import BasicAuthHook, use_basic_auth
from .cached_response import CachedResponseHook, use_cached_response
from .path_params import PathParamsHook, use_path_params
from .services import ServicesHook, use_services

__all__ = [
    "ApiKeyHook",
    "BasicAuthHook",
    "CachedResponseHook",
    "JsonBodyHook",
    "LoggingHook",
    "PathParamsHook",
    "QueryArgsHook",
    "ServicesHook",
    "use_api_key",
    "use_basic_auth",
    "use_cached_response",
    "use_json_body",
    "use_logging",
    "use_path_params",
    "use_query_args",
    "use_services",
]
