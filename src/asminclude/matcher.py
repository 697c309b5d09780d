"""Include-pattern matching against dependency coordinates.

Patterns follow the maven-assembly-plugin include syntax:
``groupId:artifactId[:type[:classifier[:version]]]``, with ``*`` wildcards
inside any segment and bracket/paren version ranges.
"""

from __future__ import annotations

import logging
from typing import Iterable

from asminclude.coordinate import Coordinate
from asminclude.utils.pattern import match_segment

__all__ = ["matches_pattern", "matches_any", "unmatched_patterns"]

_logger = logging.getLogger("asminclude.matcher")

# Index of the packaging/type slot in a full five-segment pattern.
_TYPE_SLOT = 3


def _align(tokens: list[str], pattern_tokens: list[str], offset: int) -> bool:
    return all(
        match_segment(tokens[i + offset], p) for i, p in enumerate(pattern_tokens)
    )


def matches_pattern(coordinate: str, pattern: str) -> bool:
    """Check whether an include pattern matches a canonical coordinate.

    Structural matching is tried first: segment by segment from the left,
    then right-aligned when the pattern starts with a bare ``*``. If neither
    alignment matches, the pattern still matches when it occurs verbatim
    inside the coordinate string.

    Args:
        coordinate: Canonical ``group:artifact[:classifier]`` string.
        pattern: The include pattern text.

    Returns:
        True if the pattern matches. Never raises.
    """
    tokens = coordinate.split(":")
    pattern_tokens = pattern.split(":")

    if len(pattern_tokens) == 5 and len(tokens) < 5:
        # The coordinate has no type axis, so only a wildcard type can match.
        if pattern_tokens[_TYPE_SLOT] != "*":
            return False
        pattern_tokens = pattern_tokens[:_TYPE_SLOT] + pattern_tokens[_TYPE_SLOT + 1 :]

    matched = len(pattern_tokens) <= len(tokens) and _align(tokens, pattern_tokens, 0)

    if (
        not matched
        and len(pattern_tokens) < len(tokens)
        and pattern_tokens[0] == "*"
    ):
        matched = _align(tokens, pattern_tokens, len(tokens) - len(pattern_tokens))

    if matched:
        return True

    return pattern in coordinate


def matches_any(pattern: str, dependencies: Iterable[Coordinate | str]) -> bool:
    """Return True if ``pattern`` matches at least one dependency.

    Dependencies may be :class:`Coordinate` objects or canonical strings.
    """
    for dependency in dependencies:
        if matches_pattern(str(dependency), pattern):
            _logger.debug("Include %r matched %s", pattern, dependency)
            return True
    _logger.debug("Include %r matched no dependency", pattern)
    return False


def unmatched_patterns(
    patterns: Iterable[str], dependencies: Iterable[Coordinate | str]
) -> list[str]:
    """Return the patterns that match none of the dependencies, in order."""
    resolved = [str(d) for d in dependencies]
    return [p for p in patterns if not matches_any(p, resolved)]
