"""Log format templates.

A format string mixes literal text with directives:

    "[:method] :path -> :status in :elapsed(ms, ms)"

``tokenize`` extracts the directives, ``render`` substitutes each one
with the value of a resolver function of the same name. Everything
between directives is copied verbatim.
"""

import re
import time
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime, timezone
from email.utils import formatdate
from typing import Any
from urllib.parse import urlsplit

from exobase.entities import LogToken, Props, Response

Resolver = Callable[..., Any]

DIRECTIVE = re.compile(r":([A-Za-z][\w-]*)(?:\(([^()]*)\))?")

ELAPSED_UNITS = {"ms": 1.0, "s": 1000.0, "m": 60000.0}

BUILTIN_DIRECTIVES = frozenset(
    {
        "status",
        "path",
        "url",
        "domain",
        "method",
        "elapsed",
        "date",
        "referrer",
        "ip",
        "http-version",
        "protocol",
        "user-agent",
    }
)

MISSING = "-"

DATE_FORMATS = frozenset({"web", "iso", "clf"})

# Most positional args each built-in directive accepts
BUILTIN_ARITY = {"elapsed": 2, "date": 1}


class UnknownDirectiveError(KeyError):
    """A directive in the format has no resolver."""


def check_builtin_args(tok: LogToken) -> None:
    """Reject arguments a built-in resolver would fail on at render time.

    Raises:
        ValueError: On too many args, an unknown ``elapsed`` unit or an
            unknown ``date`` format
    """
    arity = BUILTIN_ARITY.get(tok.token, 0)
    if len(tok.args) > arity:
        raise ValueError(f"Log directive {tok.raw} takes at most {arity} argument(s)")
    if not tok.args:
        return
    if tok.token == "elapsed" and tok.args[0] not in ELAPSED_UNITS:
        raise ValueError(f"Unknown elapsed unit in {tok.raw}")
    if tok.token == "date" and tok.args[0] not in DATE_FORMATS and "%" not in tok.args[0]:
        raise ValueError(f"Unknown date format in {tok.raw}")


def tokenize(fmt: str) -> list[LogToken]:
    """Extract the directives of a log format, in source order.

    Example:
        ```python
        tokenize(":status :date(iso)")
        # [LogToken("status", ":status", (), False),
        #  LogToken("date", ":date(iso)", ("iso",), True)]
        ```
    """
    tokens = []
    for found in DIRECTIVE.finditer(fmt):
        name, arglist = found.group(1), found.group(2)
        args: tuple[str, ...] = ()
        if arglist is not None and arglist.strip():
            args = tuple(arg.strip() for arg in arglist.split(","))
        tokens.append(
            LogToken(
                token=name,
                raw=found.group(0),
                args=args,
                calls=arglist is not None,
            )
        )
    return tokens


def render(fmt: str, tokens: Iterable[LogToken], resolvers: Mapping[str, Resolver]) -> str:
    """Substitute every directive of ``fmt`` with its resolver's value.

    Tokens are located left to right, each one after the end of the
    previous substitution, so resolver output is never re-scanned.

    Raises:
        UnknownDirectiveError: If a token has no resolver
    """
    parts: list[str] = []
    cursor = 0
    for tok in tokens:
        resolver = resolvers.get(tok.token)
        if resolver is None:
            raise UnknownDirectiveError(f"No resolver for log directive :{tok.token}")
        start = fmt.find(tok.raw, cursor)
        if start < 0:
            raise ValueError(f"Directive {tok.raw!r} not found in format {fmt!r}")
        value = resolver(*tok.args) if tok.calls else resolver()
        parts.append(fmt[cursor:start])
        parts.append(str(value))
        cursor = start + len(tok.raw)
    parts.append(fmt[cursor:])
    return "".join(parts)


class LogTemplate:
    """A format tokenized once and rendered per request."""

    def __init__(self, fmt: str, known: Iterable[str] | None = None) -> None:
        """
        Args:
            fmt: The log format
            known: Directive names that will have resolvers. If given,
                unknown directives fail here instead of at render time.
        """
        self.format = fmt
        self.tokens = tuple(tokenize(fmt))
        if known is not None:
            known = set(known)
            unknown = [tok.raw for tok in self.tokens if tok.token not in known]
            if unknown:
                raise ValueError(f"Unknown log directives: {', '.join(unknown)}")

    def render(self, resolvers: Mapping[str, Resolver]) -> str:
        return render(self.format, self.tokens, resolvers)


def _elapsed(started_at: float, now_ms: float) -> Resolver:
    def elapsed(unit: str | None = None, suffix: str = "") -> str:
        ms = max(now_ms - started_at, 0.0)
        if unit is None or unit == "ms":
            return f"{round(ms)}{suffix}"
        if unit not in ELAPSED_UNITS:
            raise ValueError(f"Unknown elapsed unit: {unit}")
        return f"{ms / ELAPSED_UNITS[unit]:.2f}{suffix}"

    return elapsed


def _date(now: datetime) -> Resolver:
    def date(fmt: str = "web") -> str:
        if fmt == "iso":
            return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
        if fmt == "clf":
            return now.strftime("%d/%b/%Y:%H:%M:%S +0000")
        if fmt == "web":
            return formatdate(now.timestamp(), usegmt=True)
        if "%" in fmt:
            return now.strftime(fmt)
        raise ValueError(f"Unknown date format: {fmt}")

    return date


def _domain(url: str) -> str | None:
    if not url:
        return None
    # Bare hosts like "exobase.dev/ping" carry no scheme
    parsed = urlsplit(url if "//" in url else f"//{url}")
    return parsed.hostname


def build_resolvers(props: Props, response: Response, now: float | None = None) -> dict[str, Resolver]:
    """Resolvers for the built-in directives, bound to one request.

    Args:
        props: Props the chain was called with
        response: The normalized response of the chain
        now: Epoch seconds to report as the current time

    Returns:
        Mapping of directive name to resolver
    """
    request = props.request
    now = time.time() if now is None else now
    headers = request.headers

    def value(v: Any) -> Callable[[], str]:
        return lambda: MISSING if v is None or v == "" else str(v)

    return {
        "status": value(response.status),
        "path": value(request.path),
        "url": value(request.url),
        "domain": value(_domain(request.url)),
        "method": value(request.method),
        "elapsed": _elapsed(request.started_at, now * 1000),
        "date": _date(datetime.fromtimestamp(now, tz=timezone.utc)),
        "referrer": value(headers.get("referer") or headers.get("referrer")),
        "ip": value(request.ip),
        "http-version": value(request.http_version),
        "protocol": value(request.protocol),
        "user-agent": value(headers.get("user-agent")),
    }
