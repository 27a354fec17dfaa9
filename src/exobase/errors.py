"""Error types raised inside a hook chain.

Every error a hook means to surface to the caller is a ``JsonError``.
Its class-level ``kind`` is the discriminant the pipeline boundary uses
to tell known failures apart; it is never serialized into a response
body. Anything else that escapes a chain is treated as unknown.
"""

from enum import Enum
from typing import Any

from exobase.entities import Response


class ErrorKind(str, Enum):
    """Discriminant for known error variants."""

    GENERIC = "generic"
    ROUTE_MISMATCH = "route-mismatch"
    VALIDATION = "validation"
    NOT_AUTHENTICATED = "not-authenticated"
    NOT_FOUND = "not-found"


class JsonError(Exception):
    """An error that maps onto a JSON response body.

    Args:
        message: Human readable summary
        status: HTTP status for the response
        key: Stable machine readable identifier, e.g. "exo.err.basic.noheader"
        cause: Short cause code, e.g. "NOT_FOUND"
        info: Extra detail meant for the client
        note: Extra detail meant for developers
    """

    kind: ErrorKind = ErrorKind.GENERIC
    default_status: int = 500
    default_message: str = "Unknown Error"
    default_key: str = "exo.err.unknown"

    def __init__(
        self,
        message: str | None = None,
        *,
        status: int | None = None,
        key: str | None = None,
        cause: str | None = None,
        info: str | None = None,
        note: str | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.status = status or self.default_status
        self.key = key or self.default_key
        self.cause = cause
        self.info = info
        self.note = note
        super().__init__(self.message)

    def to_body(self) -> dict[str, Any]:
        """Serialize to a response body, without the kind discriminant."""
        body: dict[str, Any] = {
            "status": self.status,
            "message": self.message,
            "key": self.key,
        }
        for name in ("cause", "info", "note"):
            value = getattr(self, name)
            if value is not None:
                body[name] = value
        return body

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status}, key={self.key!r}, message={self.message!r})"


class RouteMismatchError(JsonError):
    """Request path does not fit the declared path pattern."""

    kind = ErrorKind.ROUTE_MISMATCH
    default_status = 404
    default_message = "Not Found"
    default_key = "exo.err.path-params.mismatch"


class ValidationError(JsonError):
    """Request arguments do not have the declared shape."""

    kind = ErrorKind.VALIDATION
    default_status = 400
    default_message = "Validation Failed"
    default_key = "exo.err.validation"


class NotAuthenticatedError(JsonError):
    """Missing or invalid credentials."""

    kind = ErrorKind.NOT_AUTHENTICATED
    default_status = 401
    default_message = "Not Authenticated"
    default_key = "exo.err.not-authenticated"


class NotFoundError(JsonError):
    """A domain lookup found nothing."""

    kind = ErrorKind.NOT_FOUND
    default_status = 404
    default_message = "Not Found"
    default_key = "exo.err.not-found"


class ResponseError(Exception):
    """Short-circuits a chain with a ready-made response."""

    def __init__(self, response: Response) -> None:
        self.response = response
        super().__init__(f"Response({response.status})")


class ServiceResolutionError(Exception):
    """A required service could not be built for the request."""


def error(
    message: str | None = None,
    *,
    status: int | None = None,
    key: str | None = None,
    cause: str | None = None,
    info: str | None = None,
    note: str | None = None,
) -> JsonError:
    """Build a generic ``JsonError``; meant to be used as ``raise error(...)``.

    Example:
        ```python
        raise error(
            "Timeout not found",
            status=404,
            cause="NOT_FOUND",
            key="cb.err.timeout.find.unfound",
        )
        ```
    """
    return JsonError(message, status=status, key=key, cause=cause, info=info, note=note)
