"""Composition core: build a handler from hooks and normalize its output.

Architecture:
    adapter -> Pipeline boundary -> hook -> hook -> ... -> handler

Usage:
    ```python
    from exobase.pipeline import Pipeline
    from exobase.hooks import use_path_params, use_services

    find_timeout = Pipeline(
        [use_path_params("/v1/timeout/{id}"), use_services({"db": make_database})],
        get_timeout_by_id,
    )
    response = await find_timeout(props)
    ```
"""

from .compose import Pipeline, compose, hook
from .response import response_from_error, response_from_result

__all__ = [
    "Pipeline",
    "compose",
    "hook",
    "response_from_error",
    "response_from_result",
]
