"""Log directive entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LogToken:
    """A ``:name`` or ``:name(args)`` directive parsed from a log format.

    Attributes:
        token: Directive name, e.g. "elapsed"
        raw: Exact source text, e.g. ":elapsed(ms, ms)"
        args: Parsed argument strings, in order
        calls: True when the directive was written with parentheses
    """

    token: str
    raw: str
    args: tuple[str, ...] = ()
    calls: bool = False
