"""Response entity."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Response:
    """Abstract response produced by a handler chain.

    Attributes:
        status: HTTP status code
        body: JSON-serializable payload
        headers: Extra response headers
    """

    status: int = 200
    body: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not 100 <= self.status <= 599:
            raise ValueError(f"Invalid HTTP status: {self.status}")


default_response = Response(status=200, body={}, headers={})
