"""Translation between Starlette requests/responses and exobase entities."""

import json
import time
from collections.abc import Awaitable, Callable

from fastapi import Request as StarletteRequest
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response as StarletteResponse

from exobase.entities import Props, Request, Response
from exobase.pipeline import Pipeline


async def _read_body(request: StarletteRequest) -> object:
    raw = await request.body()
    if not raw:
        return None
    content_type = request.headers.get("content-type", "")
    if "json" in content_type:
        try:
            return json.loads(raw)
        except ValueError:
            # Leave malformed JSON as text for use_json_body to reject
            return raw.decode("utf-8", errors="replace")
    return raw.decode("utf-8", errors="replace")


async def to_props(request: StarletteRequest) -> Props:
    """Build the initial Props from a Starlette request."""
    started_at = time.time() * 1000
    return Props(
        request=Request(
            method=request.method.upper(),
            path=request.url.path,
            url=str(request.url),
            headers={k.lower(): v for k, v in request.headers.items()},
            body=await _read_body(request),
            query=dict(request.query_params),
            ip=request.client.host if request.client else None,
            http_version=request.scope.get("http_version"),
            protocol=request.url.scheme,
            started_at=started_at,
        )
    )


def to_starlette_response(response: Response) -> StarletteResponse:
    """Serialize an exobase Response."""
    if response.body is None or response.status in (204, 304):
        return StarletteResponse(status_code=response.status, headers=dict(response.headers))
    return JSONResponse(
        status_code=response.status,
        content=jsonable_encoder(response.body),
        headers=dict(response.headers),
    )


def use_fastapi(pipeline: Pipeline) -> Callable[[StarletteRequest], Awaitable[StarletteResponse]]:
    """Wrap a pipeline as a FastAPI endpoint.

    Args:
        pipeline: The composed pipeline to call for each request

    Returns:
        An endpoint taking the raw Starlette request
    """

    async def endpoint(request: StarletteRequest) -> StarletteResponse:
        props = await to_props(request)
        response = await pipeline(props)
        return to_starlette_response(response)

    return endpoint
