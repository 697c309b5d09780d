"""Tests for include-pattern matching against coordinates."""

from __future__ import annotations

import logging

import pytest

from asminclude.coordinate import Coordinate
from asminclude.matcher import matches_any, matches_pattern, unmatched_patterns


COORDINATES = [
    "org.foo:bar",
    "org.foo:bar:tests",
    "com.example:lib:sources",
    "a:b",
]


class TestMatchesPattern:
    @pytest.mark.parametrize("coordinate", COORDINATES)
    def test_star_matches_everything(self, coordinate: str) -> None:
        assert matches_pattern(coordinate, "*") is True

    @pytest.mark.parametrize("coordinate", COORDINATES)
    def test_coordinate_matches_itself(self, coordinate: str) -> None:
        assert matches_pattern(coordinate, coordinate) is True

    def test_group_wildcard(self) -> None:
        assert matches_pattern("org.foo:bar", "org.foo:*") is True
        assert matches_pattern("org.foo:bar", "org.baz:*") is False

    def test_classifier_wildcard(self) -> None:
        assert matches_pattern("org.foo:bar:tests", "org.foo:bar:*") is True

    def test_empty_segment_is_wildcard(self) -> None:
        assert matches_pattern("org.foo:bar", "org.foo:") is True

    def test_pattern_longer_than_coordinate(self) -> None:
        assert matches_pattern("org.foo:bar", "org.foo:bar:tests") is False

    def test_prefix_pattern_matches_shorter_segment_count(self) -> None:
        assert matches_pattern("org.foo:bar:tests", "org.foo") is True

    def test_version_range_segment(self) -> None:
        assert matches_pattern("org.foo:lib:1.5", "org.foo:lib:[1.0,2.0)") is True
        assert matches_pattern("org.foo:lib:2.0", "org.foo:lib:[1.0,2.0)") is False


class TestFiveSegmentPatterns:
    def test_non_wildcard_type_slot_never_matches(self) -> None:
        assert matches_pattern("org.foo:bar", "org.foo:bar:jar:tests:1.0") is False

    def test_wildcard_type_slot_collapses(self) -> None:
        """The collapsed pattern keeps four segments, more than a coordinate has."""
        assert matches_pattern("org.foo:bar:tests", "org.foo:bar:*:*:tests") is False

    def test_full_pattern_from_description(self) -> None:
        assert matches_pattern("org.foo:bar", "org.foo:bar:jar:*:tests") is False

    def test_collapsed_pattern_matches_four_segment_coordinate(self) -> None:
        assert matches_pattern("a:b:c:d", "a:b:c:*:d") is True

    def test_dropped_type_slot_keeps_classifier(self) -> None:
        """After collapsing, the last pattern segment lines up with the fourth token."""
        assert matches_pattern("a:b:c:d", "a:b:c:*:x") is False
        assert matches_pattern("a:b:c:d", "a:b:c:*:*") is True

    def test_non_wildcard_type_slot_rejects_four_segment_coordinate(self) -> None:
        assert matches_pattern("a:b:c:d", "a:b:c:jar:d") is False


class TestTrailingAlignment:
    def test_leading_star_aligns_from_the_end(self) -> None:
        assert matches_pattern("org.foo:bar:tests", "*:tests") is True

    def test_leading_star_with_mismatched_tail(self) -> None:
        assert matches_pattern("org.foo:bar:tests", "*:sources") is False

    def test_equal_length_does_not_right_align(self) -> None:
        assert matches_pattern("org.foo:bar:tests", "*:jar:*") is False

    def test_requires_bare_leading_star(self) -> None:
        assert matches_pattern("org.foo:bar:tests", "*x:tests") is False


class TestSubstringFallback:
    def test_pattern_inside_coordinate(self) -> None:
        assert matches_pattern("org.foo:bar", "foo:ba") is True

    def test_no_containment(self) -> None:
        assert matches_pattern("org.foo:bar", "foo:baz") is False

    def test_idempotent(self) -> None:
        results = [matches_pattern("org.foo:bar", "foo:ba") for _ in range(3)]
        assert results == [True, True, True]


class TestMatchesAny:
    def test_accepts_coordinates_and_strings(self) -> None:
        deps = [Coordinate("org.foo", "bar", "tests"), "com.example:lib"]
        assert matches_any("org.foo:bar:tests", deps) is True
        assert matches_any("com.example:*", deps) is True

    def test_no_dependencies(self) -> None:
        assert matches_any("*", []) is False

    def test_logs_unmatched(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="asminclude.matcher"):
            assert matches_any("org.nope:*", ["org.foo:bar"]) is False
        assert "matched no dependency" in caplog.text


class TestUnmatchedPatterns:
    def test_returns_only_unmatched_in_order(self) -> None:
        deps = [Coordinate("org.foo", "bar"), Coordinate("org.foo", "baz", "tests")]
        patterns = ["org.foo:*", "org.missing:*", "*:tests", "x:y"]
        assert unmatched_patterns(patterns, deps) == ["org.missing:*", "x:y"]
