"""Hook composition."""

import functools
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from exobase.entities import Props, Response
from exobase.errors import JsonError, ResponseError
from exobase.protocols import Handler, HookLike

from .response import response_from_error, response_from_result

logger = logging.getLogger(__name__)


def _wrapper(hook_like: HookLike) -> Callable[[Handler], Handler]:
    wrap = getattr(hook_like, "wrap", None)
    if callable(wrap):
        return wrap
    if callable(hook_like):
        return hook_like
    raise TypeError(f"Not a hook: {hook_like!r}")


def compose(*funcs: Any) -> Handler:
    """Compose hooks around a terminal handler.

    ``compose(a, b, handler)`` behaves like ``a.wrap(b.wrap(handler))``:
    ``a`` runs first on the way in and last on the way out. The fold
    happens once, here, not on every request.

    Args:
        *funcs: Zero or more hooks followed by the terminal handler

    Returns:
        The composed handler
    """
    if not funcs:
        raise TypeError("compose() needs at least a handler")
    *hooks, handler = funcs
    for hook_like in reversed(hooks):
        handler = _wrapper(hook_like)(handler)
    return handler


def hook(func: Callable[[Handler, Props], Awaitable[Any]]) -> Callable[[Handler], Handler]:
    """Turn a ``(func, props)`` coroutine function into a hook.

    Example:
        ```python
        @hook
        async def use_trace(func, props):
            result = await func(props.merge(args={"trace": "abc"}))
            return result
        ```
    """

    @functools.wraps(func)
    def wrap(inner: Handler) -> Handler:
        async def handler(props: Props) -> Any:
            return await func(inner, props)

        return handler

    return wrap


class Pipeline:
    """A composed handler plus the error boundary around it.

    Awaiting a pipeline always yields a ``Response``: results go through
    ``response_from_result`` and anything raised at any depth goes
    through ``response_from_error``, exactly once, here.

    Example:
        ```python
        pipeline = Pipeline([use_basic_auth()], list_items)
        response = await pipeline(props)
        ```
    """

    def __init__(self, hooks: Sequence[HookLike], handler: Handler) -> None:
        """Compose the chain.

        Args:
            hooks: Hooks, outermost first
            handler: Terminal business-logic handler
        """
        self._hooks = tuple(hooks)
        self._handler = compose(*self._hooks, handler)

    @property
    def handler(self) -> Handler:
        """The composed handler without the boundary (errors propagate)."""
        return self._handler

    async def __call__(self, props: Props) -> Response:
        try:
            result = await self._handler(props)
        except (JsonError, ResponseError) as err:
            return response_from_error(err)
        except Exception as err:
            logger.exception("Unhandled error in %s %s", props.request.method, props.request.path)
            return response_from_error(err)
        return response_from_result(result)
