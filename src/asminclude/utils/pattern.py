"""Single-segment wildcard and version-range matching.

A pattern segment is classified into exactly one :class:`SegmentKind`, the
first rule in ``_RULES`` that applies, and then matched by that kind's
matcher. Order matters: ``*x*`` is a contains rule even though it also
starts with ``*``.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from asminclude.version import in_range

__all__ = ["SegmentKind", "classify_segment", "match_segment"]


class SegmentKind(str, Enum):
    """Shape of a pattern segment, in rule-evaluation order."""

    ANY = "any"
    CONTAINS = "contains"
    SUFFIX = "suffix"
    PREFIX = "prefix"
    EMBEDDED = "embedded"
    VERSION_RANGE = "version_range"
    EXACT = "exact"


_RULES: tuple[tuple[SegmentKind, Callable[[str], bool]], ...] = (
    (SegmentKind.ANY, lambda p: p == "*" or p == ""),
    (SegmentKind.CONTAINS, lambda p: len(p) >= 2 and p.startswith("*") and p.endswith("*")),
    (SegmentKind.SUFFIX, lambda p: p.startswith("*")),
    (SegmentKind.PREFIX, lambda p: p.endswith("*")),
    (SegmentKind.EMBEDDED, lambda p: "*" in p),
    (SegmentKind.VERSION_RANGE, lambda p: p.startswith(("[", "("))),
)


def classify_segment(pattern: str) -> SegmentKind:
    """Return the kind of the first rule that applies to ``pattern``."""
    for kind, applies in _RULES:
        if applies(pattern):
            return kind
    return SegmentKind.EXACT


def _match_embedded(token: str, pattern: str) -> bool:
    # Each part's first occurrence must start after the previous part's end.
    # The token is not anchored at either end; an empty part never matches.
    last_end = -1
    for part in pattern.split("*"):
        idx = token.find(part)
        if idx <= last_end:
            return False
        last_end = idx + len(part)
    return True


_MATCHERS: dict[SegmentKind, Callable[[str, str], bool]] = {
    SegmentKind.ANY: lambda token, pattern: True,
    SegmentKind.CONTAINS: lambda token, pattern: pattern[1:-1] in token,
    SegmentKind.SUFFIX: lambda token, pattern: token.endswith(pattern[1:]),
    SegmentKind.PREFIX: lambda token, pattern: token.startswith(pattern[:-1]),
    SegmentKind.EMBEDDED: _match_embedded,
    SegmentKind.VERSION_RANGE: in_range,
    SegmentKind.EXACT: lambda token, pattern: token == pattern,
}


def match_segment(token: str, pattern: str) -> bool:
    """Match one coordinate segment against one pattern segment.

    Args:
        token: A segment of the coordinate, e.g. ``org.foo`` or ``1.5``.
        pattern: A segment of the include pattern. ``*`` is a wildcard;
            a leading ``[`` or ``(`` makes it a version range.

    Returns:
        True if the segment matches. Never raises.
    """
    return _MATCHERS[classify_segment(pattern)](token, pattern)
