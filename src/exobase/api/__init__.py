"""FastAPI runtime adapter.

Turns a ``Pipeline`` into a FastAPI/Starlette endpoint. Route
registration stays with FastAPI.

Usage:
    ```python
    from fastapi import FastAPI
    from exobase.api import use_fastapi

    app = FastAPI()
    app.add_api_route("/v1/timeout/{id}", use_fastapi(find_timeout), methods=["GET"])
    ```
"""

from .adapter import to_props, to_starlette_response, use_fastapi

__all__ = ["to_props", "to_starlette_response", "use_fastapi"]
