"""Props entity."""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from .request import Request
from .response import Response


@dataclass(frozen=True)
class Props:
    """Per-request state threaded through a hook chain.

    Hooks contribute data by calling ``merge``, which returns a new
    Props with the new keys layered over the existing ones. Nothing set
    by an earlier hook is ever dropped.

    Attributes:
        request: The inbound request
        response: Scratch response, if a hook set one
        args: Arguments collected by hooks (path params, body, query)
        services: Named dependencies (database, cache, ...)
        auth: Credentials collected by authentication hooks
    """

    request: Request = field(default_factory=Request)
    response: Response | None = None
    args: Mapping[str, Any] = field(default_factory=dict)
    services: Mapping[str, Any] = field(default_factory=dict)
    auth: Mapping[str, Any] = field(default_factory=dict)

    def merge(
        self,
        args: Mapping[str, Any] | None = None,
        services: Mapping[str, Any] | None = None,
        auth: Mapping[str, Any] | None = None,
        response: Response | None = None,
    ) -> "Props":
        """Return a copy with the given fields merged in."""
        return replace(
            self,
            args={**self.args, **(args or {})},
            services={**self.services, **(services or {})},
            auth={**self.auth, **(auth or {})},
            response=response if response is not None else self.response,
        )
