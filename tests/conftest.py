"""Shared fixtures and fakes for the exobase tests."""

import pytest

from exobase import Props, Request


class MemoryCache:
    """Dict-backed CacheBackend that records every call."""

    def __init__(self, data=None):
        self.data = dict(data or {})
        self.gets = []
        self.sets = []

    async def get(self, key):
        self.gets.append(key)
        return self.data.get(key)

    async def set(self, key, value, ttl):
        self.sets.append((key, value, ttl))
        self.data[key] = value


class BrokenCache(MemoryCache):
    """CacheBackend whose GET and/or SET always raise."""

    def __init__(self, fail_get=True, fail_set=True):
        super().__init__()
        self.fail_get = fail_get
        self.fail_set = fail_set

    async def get(self, key):
        self.gets.append(key)
        if self.fail_get:
            raise ConnectionError("cache down")
        return None

    async def set(self, key, value, ttl):
        self.sets.append((key, value, ttl))
        if self.fail_set:
            raise ConnectionError("cache down")


class RecordingLogger:
    """HookLogger that keeps what it was given."""

    def __init__(self):
        self.logs = []
        self.warnings = []
        self.errors = []

    def log(self, message):
        self.logs.append(message)

    def warn(self, message):
        self.warnings.append(message)

    def error(self, message, detail=None):
        self.errors.append((message, detail))


class CountingHandler:
    """Terminal handler that counts calls and returns a fixed result."""

    def __init__(self, result=None):
        self.result = {"ok": True} if result is None else result
        self.calls = []

    async def __call__(self, props):
        self.calls.append(props)
        return self.result


@pytest.fixture
def make_props():
    def _make(path="/ping", method="GET", headers=None, body=None, query=None, **kwargs):
        request = Request(
            method=method,
            path=path,
            url=f"https://exobase.dev{path}",
            headers={k.lower(): v for k, v in (headers or {}).items()},
            body=body,
            query=query or {},
            ip="127.0.0.1",
            http_version="1.1",
            protocol="https",
        )
        return Props(request=request, **kwargs)

    return _make


@pytest.fixture
def memory_cache():
    return MemoryCache()


@pytest.fixture
def recording_logger():
    return RecordingLogger()
