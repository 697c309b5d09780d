"""asminclude - check assembly include patterns against project dependencies."""

from __future__ import annotations

# Core matching
from asminclude.coordinate import Coordinate, build_coordinate
from asminclude.matcher import matches_any, matches_pattern, unmatched_patterns
from asminclude.utils.pattern import SegmentKind, classify_segment, match_segment
from asminclude.version import ComparableVersion, VersionRange, in_range

# Integration
from asminclude.config import Config
from asminclude.descriptor import DescriptorChecker, IncludeProblem
from asminclude.manifest import load_manifest, parse_manifest

# Errors
from asminclude.errors import (
    AsmIncludeError,
    ConfigError,
    ConfigNotFoundError,
    CoordinateError,
    DescriptorNotFoundError,
    DescriptorParseError,
    ErrorCodes,
    ManifestError,
)

__version__ = "0.1.0"

__all__ = [
    # Core matching
    "Coordinate",
    "build_coordinate",
    "matches_pattern",
    "matches_any",
    "unmatched_patterns",
    "SegmentKind",
    "classify_segment",
    "match_segment",
    "ComparableVersion",
    "VersionRange",
    "in_range",
    # Integration
    "Config",
    "DescriptorChecker",
    "IncludeProblem",
    "load_manifest",
    "parse_manifest",
    # Errors
    "ErrorCodes",
    "AsmIncludeError",
    "ConfigError",
    "ConfigNotFoundError",
    "CoordinateError",
    "DescriptorNotFoundError",
    "DescriptorParseError",
    "ManifestError",
]
