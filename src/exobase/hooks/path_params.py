"""Path parameter hook."""

from typing import Any

from exobase.entities import Props
from exobase.matching import PathPattern
from exobase.protocols import Handler


class PathParamsHook:
    """Adds the placeholder segments of the request path to ``args``."""

    def __init__(self, pattern: str) -> None:
        self.pattern = PathPattern.compile(pattern)

    def wrap(self, func: Handler) -> Handler:
        async def handler(props: Props) -> Any:
            params = self.pattern.match(props.request.path)
            return await func(props.merge(args=params))

        return handler


def use_path_params(pattern: str) -> PathParamsHook:
    """Parse ``{name}`` segments of ``pattern`` out of the request path.

    A path that does not fit the pattern fails the request with a
    ``RouteMismatchError`` (404).
    """
    return PathParamsHook(pattern)
