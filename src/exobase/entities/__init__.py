"""Domain entities threaded through a hook chain.

These are frozen dataclasses. A hook never mutates one in place; it
builds a new value (see ``Props.merge``) so concurrent requests stay
isolated from each other.
"""

from .log_token import LogToken
from .props import Props
from .request import Request
from .response import Response, default_response

__all__ = ["LogToken", "Props", "Request", "Response", "default_response"]
