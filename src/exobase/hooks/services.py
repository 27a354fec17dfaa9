"""Service resolution hook."""

import asyncio
import inspect
import logging
from collections.abc import Callable, Mapping
from typing import Any

from exobase.entities import Props
from exobase.errors import ServiceResolutionError
from exobase.protocols import Handler

logger = logging.getLogger(__name__)


def _takes_props(factory: Callable[..., Any]) -> bool:
    try:
        params = inspect.signature(factory).parameters.values()
    except (TypeError, ValueError):
        return False
    # Only a required positional slot receives the props
    return any(
        p.kind is p.VAR_POSITIONAL
        or (p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty)
        for p in params
    )


class ServicesHook:
    """Builds named services per request and adds them to ``services``."""

    def __init__(self, factories: Mapping[str, Callable[..., Any]]) -> None:
        self._factories = {
            name: (factory, _takes_props(factory)) for name, factory in factories.items()
        }

    async def _resolve(self, name: str, props: Props) -> Any:
        factory, takes_props = self._factories[name]
        try:
            value = factory(props) if takes_props else factory()
            if inspect.isawaitable(value):
                value = await value
        except Exception as e:
            logger.error("Failed to resolve service %r: %s", name, e)
            raise ServiceResolutionError(f"Could not resolve service {name!r}") from e
        return value

    def wrap(self, func: Handler) -> Handler:
        async def handler(props: Props) -> Any:
            names = list(self._factories)
            values = await asyncio.gather(*(self._resolve(name, props) for name in names))
            return await func(props.merge(services=dict(zip(names, values))))

        return handler


def use_services(factories: Mapping[str, Callable[..., Any]]) -> ServicesHook:
    """Resolve services such as a database or cache client for the handler.

    Factories may be sync or async. A factory with one required positional
    parameter is called with the props, one whose parameters all have
    defaults is called with none. A factory that fails aborts the request
    with a 500.

    Example:
        ```python
        use_services({"db": make_database, "cache": RedisCacheBackend.create})
        ```
    """
    return ServicesHook(factories)
