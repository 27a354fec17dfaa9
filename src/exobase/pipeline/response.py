"""Conversion of handler results and raised errors into responses."""

from typing import Any

from exobase.entities import Response
from exobase.errors import JsonError, ResponseError

UNKNOWN_ERROR_BODY = {"message": "Unknown Error"}


def response_from_result(result: Any) -> Response:
    """Wrap a handler's return value in a ``Response``.

    A value that already is a ``Response`` is returned unchanged.
    """
    if isinstance(result, Response):
        return result
    return Response(status=200, body=result)


def response_from_error(err: Any) -> Response:
    """Normalize anything raised in a chain into a ``Response``.

    Idempotent: passing a ``Response`` returns that same object. A
    ``JsonError`` keeps its status and serializes its fields, unless the
    status is not a valid HTTP status. Anything else becomes a 500 that
    does not leak the exception message.

    Args:
        err: The raised exception (or an already normalized response)

    Returns:
        The response to send
    """
    if isinstance(err, Response):
        return err
    if isinstance(err, ResponseError):
        return err.response
    if isinstance(err, JsonError) and isinstance(err.status, int) and 100 <= err.status <= 599:
        return Response(status=err.status, body=err.to_body())
    return Response(status=500, body=dict(UNKNOWN_ERROR_BODY))
