"""Logger protocol used by hooks that report what they do."""

import logging
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HookLogger(Protocol):
    """Minimal logger a hook can be configured with.

    Hooks treat a missing logger as "be silent".
    """

    def log(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def error(self, message: str, detail: Any = None) -> None: ...


class StdLogger:
    """Adapts a stdlib ``logging.Logger`` to ``HookLogger``."""

    def __init__(self, logger: logging.Logger | str) -> None:
        self._logger = logging.getLogger(logger) if isinstance(logger, str) else logger

    def log(self, message: str) -> None:
        self._logger.info(message)

    def warn(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str, detail: Any = None) -> None:
        if isinstance(detail, BaseException):
            self._logger.error(message, exc_info=detail)
        elif detail is not None:
            self._logger.error("%s: %s", message, detail)
        else:
            self._logger.error(message)
