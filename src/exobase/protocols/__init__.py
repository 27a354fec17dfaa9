"""Protocol interfaces for the external collaborators of a hook chain.

Protocols use structural typing, so any object with the right methods
can be injected: a Redis client wrapper, an in-memory fake in tests, a
stdlib logger adapter, and so on.
"""

from .cache_backend import CacheBackend
from .hook import Handler, Hook, HookLike
from .logger import HookLogger, StdLogger

__all__ = [
    "CacheBackend",
    "Handler",
    "Hook",
    "HookLike",
    "HookLogger",
    "StdLogger",
]
