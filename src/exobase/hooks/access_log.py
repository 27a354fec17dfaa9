"""Access logging hook."""

from typing import Any

from exobase.config import settings
from exobase.entities import Props
from exobase.logs import BUILTIN_DIRECTIVES, LogTemplate, build_resolvers, check_builtin_args
from exobase.pipeline import response_from_error, response_from_result
from exobase.protocols import Handler, HookLogger, StdLogger

ACCESS_LOGGER = "exobase.access"


class LoggingHook:
    """Writes one formatted line per request after the chain finishes."""

    def __init__(self, fmt: str, logger: HookLogger) -> None:
        self.template = LogTemplate(fmt, known=BUILTIN_DIRECTIVES)
        for tok in self.template.tokens:
            check_builtin_args(tok)
        self.logger = logger

    def wrap(self, func: Handler) -> Handler:
        async def handler(props: Props) -> Any:
            try:
                result = await func(props)
            except Exception as err:
                response = response_from_error(err)
                self.logger.error(self.template.render(build_resolvers(props, response)))
                raise
            response = response_from_result(result)
            self.logger.log(self.template.render(build_resolvers(props, response)))
            return result

        return handler


def use_logging(fmt: str | None = None, logger: HookLogger | None = None) -> LoggingHook:
    """Log every request with a format such as ``":method :path :status"``.

    Successful requests go to ``logger.log`` and failed ones to
    ``logger.error``. Errors are re-raised for the pipeline boundary.

    Args:
        fmt: Log format. Defaults to ``settings.log_format``
        logger: Destination. Defaults to the ``exobase.access`` logger
    """
    return LoggingHook(fmt or settings.log_format, logger or StdLogger(ACCESS_LOGGER))
