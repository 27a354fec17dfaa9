"""API key authentication hook."""

import hmac
import inspect
import logging
import re
from collections.abc import Awaitable, Callable
from typing import Any, Union

from exobase.entities import Props
from exobase.errors import NotAuthenticatedError
from exobase.protocols import Handler

logger = logging.getLogger(__name__)

KeySource = Union[str, Callable[[Props], Union[str, None, Awaitable[Union[str, None]]]]]

KEY_PREFIX = re.compile(r"^[Kk]ey\s")


class ApiKeyHook:
    """Requires an ``x-api-key`` header equal to the expected key."""

    def __init__(self, key: KeySource) -> None:
        self._key = key

    async def expected_key(self, props: Props) -> str | None:
        if not callable(self._key):
            return self._key
        value = self._key(props)
        if inspect.isawaitable(value):
            value = await value
        return value

    def wrap(self, func: Handler) -> Handler:
        async def handler(props: Props) -> Any:
            header = props.request.header("x-api-key")
            if not header:
                raise NotAuthenticatedError(
                    info="This function requires an api key",
                    key="exo.api-key.missing-header",
                )

            provided = KEY_PREFIX.sub("", header, count=1).strip()
            if not provided:
                raise NotAuthenticatedError(info="Invalid api key", key="exo.api-key.missing-key")

            try:
                expected = await self.expected_key(props)
            except Exception as e:
                logger.warning("API key lookup failed: %s", e)
                raise NotAuthenticatedError(
                    info="Server cannot authenticate",
                    key="exo.api-key.key-error",
                ) from e

            if not expected:
                raise NotAuthenticatedError(
                    info="Server cannot authenticate",
                    key="exo.api-key.key-not-found",
                )

            if not hmac.compare_digest(provided.encode(), expected.encode()):
                raise NotAuthenticatedError(info="Invalid api key", key="exo.api-key.mismatch")

            return await func(props.merge(auth={"api_key": provided}))

        return handler


def use_api_key(key: KeySource) -> ApiKeyHook:
    """Authenticate requests with a static key or a key lookup function.

    The header may carry a ``Key `` prefix, e.g. ``X-Api-Key: Key abc``.
    The lookup function receives the props and may be async.
    """
    return ApiKeyHook(key)
