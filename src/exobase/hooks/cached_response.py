"""Cached response hook."""

from typing import Any

from exobase.caching import CacheOptions, cache_key
from exobase.entities import Props
from exobase.errors import ServiceResolutionError
from exobase.protocols import CacheBackend, Handler

TAG = "[use_cached_response]"


class CachedResponseHook:
    """Get-before-compute, set-after-compute caching of a handler.

    The backend is taken from ``props.services["cache"]``. Backend
    failures on GET or SET are logged and never reach the caller: a
    failed GET counts as a miss, a failed SET only means the result is
    not persisted. Concurrent misses on one key may both compute.
    """

    def __init__(self, options: CacheOptions) -> None:
        self.options = options
        self.ttl = options.ttl_seconds

    def _log(self, message: str) -> None:
        if self.options.logger is not None:
            self.options.logger.log(message)

    def _error(self, message: str, detail: Any) -> None:
        if self.options.logger is not None:
            self.options.logger.error(message, detail)

    def _skip(self, props: Props) -> bool:
        rule = self.options.skipping
        if rule is None:
            return False
        value = props.request.header(rule.header)
        if value is not None and value == rule.value:
            self._log(f"{TAG} Skipping cache {rule.header}={value}")
            return True
        return False

    def wrap(self, func: Handler) -> Handler:
        opts = self.options

        async def handler(props: Props) -> Any:
            if self._skip(props):
                return await func(props)

            cache: CacheBackend | None = props.services.get("cache")
            if cache is None:
                raise ServiceResolutionError("use_cached_response requires a 'cache' service")
            key = cache_key(opts.key, opts.to_identity(props.args))

            cached = None
            try:
                cached = await cache.get(key)
            except Exception as e:
                self._error(f"{TAG} Error on GET, falling back to function", e)

            if cached:
                self._log(f"{TAG} Cache hit for key: {key}")
                return opts.to_response(cached)
            self._log(f"{TAG} Cache miss key: {key}")

            response = await func(props)
            value = opts.to_cache(response)
            try:
                await cache.set(key, value, self.ttl)
            except Exception as e:
                self._error(f"{TAG} Error on SET, the function result was not persisted.", e)
            return response

        return handler


def use_cached_response(options: CacheOptions | None = None, **kwargs: Any) -> CachedResponseHook:
    """Cache a handler's result keyed by its (identity) args.

    Accepts a ``CacheOptions`` or the same fields as keyword arguments.

    Example:
        ```python
        use_cached_response(
            key="timeouts.list",
            ttl=timedelta(minutes=5),
            skipping=SkipRule(header="x-skip-cache", value="yes"),
            to_identity=lambda args: {"owner": args["owner"]},
        )
        ```
    """
    if options is None:
        options = CacheOptions(**kwargs)
    elif kwargs:
        raise TypeError("Pass either CacheOptions or keyword options, not both")
    return CachedResponseHook(options)
