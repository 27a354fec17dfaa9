"""Inbound request entity."""

import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _now_ms() -> float:
    return time.time() * 1000


@dataclass(frozen=True)
class Request:
    """Runtime-independent view of an inbound request.

    Adapters build one of these from whatever native request object the
    hosting runtime provides.

    Attributes:
        method: HTTP method, upper case
        path: Request path without the query string
        url: Full request url as received
        headers: Header mapping with lower-cased names
        body: Decoded body (mapping, str, bytes or None)
        query: Query string parameters
        ip: Client address, if known
        http_version: e.g. "1.1"
        protocol: "http" or "https"
        started_at: Receipt time in epoch milliseconds
    """

    method: str = "GET"
    path: str = "/"
    url: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any = None
    query: Mapping[str, Any] = field(default_factory=dict)
    ip: str | None = None
    http_version: str | None = None
    protocol: str | None = None
    started_at: float = field(default_factory=_now_ms)

    def header(self, name: str, default: str | None = None) -> str | None:
        """Case-insensitive header lookup."""
        return self.headers.get(name.lower(), default)
