"""Handler and hook contracts."""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, Union, runtime_checkable

from exobase.entities import Props

Handler = Callable[[Props], Awaitable[Any]]


@runtime_checkable
class Hook(Protocol):
    """A transform from handler to handler.

    ``wrap`` may run code before delegating to ``func``, after it, or
    both, and may skip calling ``func`` entirely.
    """

    def wrap(self, func: Handler) -> Handler: ...


HookLike = Union[Hook, Callable[[Handler], Handler]]
