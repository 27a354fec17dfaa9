"""HTTP basic authentication hook."""

import base64
import binascii
from typing import Any

from exobase.entities import Props
from exobase.errors import NotAuthenticatedError
from exobase.protocols import Handler


class BasicAuthHook:
    """Parses ``Authorization: Basic ...`` into client credentials."""

    def wrap(self, func: Handler) -> Handler:
        async def handler(props: Props) -> Any:
            header = props.request.header("authorization")
            if not header:
                raise NotAuthenticatedError(
                    "This function requires authentication via a token",
                    key="exo.err.basic.noheader",
                )

            token = header[len("Basic "):] if header.startswith("Basic ") else ""
            if not token:
                raise NotAuthenticatedError(
                    "This function requires authentication via a token",
                    key="exo.err.basic.nobasic",
                )

            try:
                decoded = base64.b64decode(token, validate=True).decode("utf-8")
            except (binascii.Error, UnicodeDecodeError):
                decoded = ""
            client_id, _, client_secret = decoded.partition(":")

            if not client_id or not client_secret:
                raise NotAuthenticatedError(
                    "Cannot call this function without a valid authentication token",
                    key="exo.err.basic.misformat",
                )

            return await func(
                props.merge(auth={"client_id": client_id, "client_secret": client_secret})
            )

        return handler


def use_basic_auth() -> BasicAuthHook:
    """Require basic auth credentials and add them to ``auth``."""
    return BasicAuthHook()
