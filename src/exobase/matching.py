"""Path parameter matching.

Patterns are plain path strings where a segment written as ``{name}``
captures the request path segment in the same position:

    "/v1/show/{workspace}/account/{account}"

Matching is positional and case-sensitive. There are no wildcards,
regexes or optional segments.
"""

from dataclasses import dataclass

from exobase.errors import RouteMismatchError


@dataclass(frozen=True)
class Segment:
    """One ``/``-separated piece of a pattern."""

    value: str
    is_param: bool

    @classmethod
    def parse(cls, raw: str) -> "Segment":
        if len(raw) > 2 and raw.startswith("{") and raw.endswith("}"):
            return cls(value=raw[1:-1], is_param=True)
        return cls(value=raw, is_param=False)


@dataclass(frozen=True)
class PathPattern:
    """A compiled path pattern, safe to share between requests."""

    source: str
    segments: tuple[Segment, ...]

    @classmethod
    def compile(cls, pattern: str) -> "PathPattern":
        return cls(
            source=pattern,
            segments=tuple(Segment.parse(part) for part in pattern.split("/")),
        )

    @property
    def params(self) -> tuple[str, ...]:
        """Names of the placeholder segments, in order."""
        return tuple(seg.value for seg in self.segments if seg.is_param)

    def match(self, path: str) -> dict[str, str]:
        """Match a request path, returning the placeholder bindings.

        Raises:
            RouteMismatchError: If segment counts differ or a literal
                segment is not equal to the path segment
        """
        parts = path.split("/")
        if len(parts) != len(self.segments):
            raise RouteMismatchError(
                info=f"Path {path} does not match pattern {self.source}",
                note="Segment count differs",
            )
        params: dict[str, str] = {}
        for seg, part in zip(self.segments, parts):
            if seg.is_param:
                params[seg.value] = part
            elif seg.value != part:
                raise RouteMismatchError(
                    info=f"Path {path} does not match pattern {self.source}",
                    note=f"Expected segment {seg.value!r}, got {part!r}",
                )
        return params


def parse_path_params(path: str, pattern: str) -> dict[str, str]:
    """Match ``path`` against ``pattern`` and return the named segments.

    Example:
        ```python
        parse_path_params("/v1/show/w1/account/a1", "/v1/show/{workspace}/account/{account}")
        # {"workspace": "w1", "account": "a1"}
        ```
    """
    return PathPattern.compile(pattern).match(path)
