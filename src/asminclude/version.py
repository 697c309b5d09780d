"""Maven version ordering and bracket/paren version ranges.

Versions are ordered the way Maven's ``ComparableVersion`` orders them, so
``1.0-alpha-1 < 1.0-SNAPSHOT < 1.0 < 1.0-sp`` and ``1.0 == 1.0.0``.
Ranges follow ``VersionRange.createFromVersionSpec``: ``[1.0,2.0)``,
``(,1.0]``, ``[1.2]`` and unions such as ``(,1.0],[1.2,)``.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from itertools import zip_longest

__all__ = ["ComparableVersion", "Restriction", "VersionRange", "in_range"]

_QUALIFIERS = ("alpha", "beta", "milestone", "rc", "snapshot", "", "sp")
_RELEASE_QUALIFIER = str(_QUALIFIERS.index(""))
_ALIASES = {"ga": "", "final": "", "release": "", "cr": "rc"}
_SHORT_QUALIFIERS = {"a": "alpha", "b": "beta", "m": "milestone"}


def _cmp(left: object, right: object) -> int:
    return (left > right) - (left < right)  # type: ignore[operator]


def _comparable_qualifier(qualifier: str) -> str:
    # Unknown qualifiers sort after every known one, then lexically.
    if qualifier in _QUALIFIERS:
        return str(_QUALIFIERS.index(qualifier))
    return f"{len(_QUALIFIERS)}-{qualifier}"


class _IntItem:
    __slots__ = ("value",)

    def __init__(self, value: int) -> None:
        self.value = value

    def is_null(self) -> bool:
        return self.value == 0

    def compare(self, other: _Item | None) -> int:
        if other is None:
            return 0 if self.value == 0 else 1
        if isinstance(other, _IntItem):
            return _cmp(self.value, other.value)
        return 1


class _StringItem:
    __slots__ = ("value",)

    def __init__(self, value: str, followed_by_digit: bool) -> None:
        if followed_by_digit and len(value) == 1:
            value = _SHORT_QUALIFIERS.get(value, value)
        self.value = _ALIASES.get(value, value)

    def is_null(self) -> bool:
        return self.value == ""

    def compare(self, other: _Item | None) -> int:
        if other is None:
            return _cmp(_comparable_qualifier(self.value), _RELEASE_QUALIFIER)
        if isinstance(other, _StringItem):
            return _cmp(
                _comparable_qualifier(self.value), _comparable_qualifier(other.value)
            )
        return -1


class _ListItem(list):
    # Items are ordered with compare(); list equality would ignore Maven rules.
    __eq__ = None  # type: ignore[assignment]
    __ne__ = None  # type: ignore[assignment]

    def is_null(self) -> bool:
        return len(self) == 0

    def normalize(self) -> None:
        """Drop trailing null items, stopping at the first non-list item."""
        for i in range(len(self) - 1, -1, -1):
            item = self[i]
            if item.is_null():
                del self[i]
            elif not isinstance(item, _ListItem):
                break

    def compare(self, other: _Item | None) -> int:
        if other is None:
            if not self:
                return 0
            return self[0].compare(None)
        if isinstance(other, _IntItem):
            return -1
        if isinstance(other, _StringItem):
            return 1
        for left, right in zip_longest(self, other):
            if left is None:
                result = -right.compare(None)
            else:
                result = left.compare(right)
            if result != 0:
                return result
        return 0


_Item = _IntItem | _StringItem | _ListItem


def _parse_item(is_digit: bool, text: str) -> _IntItem | _StringItem:
    if is_digit:
        return _IntItem(int(text))
    return _StringItem(text, False)


def _parse_version(version: str) -> _ListItem:
    version = version.lower()
    items = current = _ListItem()
    stack = [current]
    is_digit = False
    start = 0

    def open_sublist() -> None:
        nonlocal current
        sub = _ListItem()
        current.append(sub)
        current = sub
        stack.append(sub)

    for i, char in enumerate(version):
        if char in ".-":
            if i == start:
                current.append(_IntItem(0))
            else:
                current.append(_parse_item(is_digit, version[start:i]))
            start = i + 1
            if char == "-":
                open_sublist()
        elif "0" <= char <= "9":
            if not is_digit and i > start:
                current.append(_StringItem(version[start:i], True))
                start = i
                open_sublist()
            is_digit = True
        else:
            if is_digit and i > start:
                current.append(_parse_item(True, version[start:i]))
                start = i
                open_sublist()
            is_digit = False

    if len(version) > start:
        current.append(_parse_item(is_digit, version[start:]))

    while stack:
        stack.pop().normalize()
    return items


@functools.total_ordering
class ComparableVersion:
    """A version string with Maven ordering semantics.

    Any string is a valid version; unrecognized text simply becomes a
    qualifier that sorts after the well-known ones.
    """

    def __init__(self, version: str) -> None:
        self._version = version
        self._items = _parse_version(version)

    def compare_to(self, other: ComparableVersion) -> int:
        """Return a negative, zero or positive int, like ``Comparable``."""
        return self._items.compare(other._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComparableVersion):
            return NotImplemented
        return self.compare_to(other) == 0

    def __lt__(self, other: ComparableVersion) -> bool:
        if not isinstance(other, ComparableVersion):
            return NotImplemented
        return self.compare_to(other) < 0

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self._version

    def __repr__(self) -> str:
        return f"ComparableVersion({self._version!r})"


@dataclass(frozen=True, eq=False)
class Restriction:
    """One interval of a version range. ``None`` bounds are unbounded."""

    lower: ComparableVersion | None
    lower_inclusive: bool
    upper: ComparableVersion | None
    upper_inclusive: bool

    def contains(self, version: ComparableVersion) -> bool:
        if self.lower is not None:
            comparison = self.lower.compare_to(version)
            if comparison > 0 or (comparison == 0 and not self.lower_inclusive):
                return False
        if self.upper is not None:
            comparison = self.upper.compare_to(version)
            if comparison < 0 or (comparison == 0 and not self.upper_inclusive):
                return False
        return True


_EVERYTHING = Restriction(None, False, None, False)


def _parse_restriction(spec: str) -> Restriction | None:
    lower_inclusive = spec.startswith("[")
    upper_inclusive = spec.endswith("]")
    body = spec[1:-1].strip()

    if "," not in body:
        # A single version must be written as [v].
        if not (lower_inclusive and upper_inclusive):
            return None
        exact = ComparableVersion(body)
        return Restriction(exact, True, exact, True)

    lower_text, _, upper_text = body.partition(",")
    lower_text = lower_text.strip()
    upper_text = upper_text.strip()
    if lower_text == upper_text:
        return None

    lower = ComparableVersion(lower_text) if lower_text else None
    upper = ComparableVersion(upper_text) if upper_text else None
    if lower is not None and upper is not None and upper < lower:
        return None
    return Restriction(lower, lower_inclusive, upper, upper_inclusive)


@dataclass(frozen=True, eq=False)
class VersionRange:
    """A union of version intervals, or a bare recommended version.

    Attributes:
        restrictions: Intervals in ascending, non-overlapping order.
        recommended: The bare version when the range had no brackets.
    """

    restrictions: tuple[Restriction, ...]
    recommended: ComparableVersion | None = None

    @classmethod
    def parse(cls, spec: str) -> VersionRange | None:
        """Parse a range spec.

        Returns:
            The parsed range, or None when the text is not a valid range.
            Callers treat None as a range that contains nothing.
        """
        process = spec.strip()
        restrictions: list[Restriction] = []
        previous_upper: ComparableVersion | None = None

        while process.startswith(("[", "(")):
            close_paren = process.find(")")
            close_bracket = process.find("]")
            index = close_bracket
            if close_bracket < 0 or 0 <= close_paren < close_bracket:
                index = close_paren
            if index < 0:
                return None

            restriction = _parse_restriction(process[: index + 1])
            if restriction is None:
                return None
            if previous_upper is not None and (
                restriction.lower is None or restriction.lower < previous_upper
            ):
                return None
            restrictions.append(restriction)
            previous_upper = restriction.upper

            process = process[index + 1 :].strip()
            if process.startswith(","):
                process = process[1:].strip()

        if process:
            if restrictions:
                return None
            return cls(restrictions=(_EVERYTHING,), recommended=ComparableVersion(process))
        if not restrictions:
            return None
        return cls(restrictions=tuple(restrictions))

    def contains(self, version: str | ComparableVersion) -> bool:
        if isinstance(version, str):
            version = ComparableVersion(version)
        return any(r.contains(version) for r in self.restrictions)


def in_range(version: str, range_expr: str) -> bool:
    """Check whether ``version`` falls inside ``range_expr``.

    An unparseable range contains nothing, so the result is False rather
    than an error.
    """
    version_range = VersionRange.parse(range_expr)
    if version_range is None:
        return False
    return version_range.contains(version)
