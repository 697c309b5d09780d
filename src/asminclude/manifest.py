"""Dependency manifests: the resolved dependency list of a project, as YAML.

Two shapes are accepted::

    dependencies:
      - group_id: org.foo
        artifact_id: bar
        classifier: tests
      - org.foo:baz

or a bare top-level list of the same entries.
"""

from __future__ import annotations

import logging
import os
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from asminclude.coordinate import Coordinate
from asminclude.errors import ConfigNotFoundError, CoordinateError, ManifestError

__all__ = ["DependencyEntry", "DependencyManifest", "load_manifest", "parse_manifest"]

_logger = logging.getLogger("asminclude.manifest")


class DependencyEntry(BaseModel):
    """One resolved dependency."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    group_id: str = Field(min_length=1)
    artifact_id: str = Field(min_length=1)
    classifier: str | None = None

    @model_validator(mode="before")
    @classmethod
    def from_canonical_string(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        try:
            coordinate = Coordinate.parse(value)
        except CoordinateError as e:
            raise ValueError(e.message) from e
        return {
            "group_id": coordinate.group_id,
            "artifact_id": coordinate.artifact_id,
            "classifier": coordinate.classifier,
        }

    def to_coordinate(self) -> Coordinate:
        return Coordinate(
            group_id=self.group_id,
            artifact_id=self.artifact_id,
            classifier=self.classifier or None,
        )


class DependencyManifest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    dependencies: list[DependencyEntry] = Field(default_factory=list)


def _error_details(error: ValidationError) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for err in error.errors():
        loc = err.get("loc", ())
        path = "/" + "/".join(str(segment) for segment in loc) if loc else "/"
        details.append(
            {"path": path, "message": err.get("msg", ""), "type": err.get("type", "")}
        )
    return details


def parse_manifest(data: Any) -> list[Coordinate]:
    """Validate already-loaded manifest data and return its coordinates.

    Raises:
        ManifestError: If the data does not describe a dependency list.
    """
    if data is None:
        return []
    if isinstance(data, list):
        data = {"dependencies": data}
    if not isinstance(data, dict):
        raise ManifestError(
            f"Manifest must be a mapping or a list, got {type(data).__name__}"
        )

    try:
        manifest = DependencyManifest.model_validate(data)
    except ValidationError as e:
        raise ManifestError(
            "Invalid dependency manifest", errors=_error_details(e), cause=e
        ) from e
    return [entry.to_coordinate() for entry in manifest.dependencies]


def load_manifest(yaml_path: str) -> list[Coordinate]:
    """Load a dependency manifest from a YAML file.

    Args:
        yaml_path: Path to the manifest.

    Returns:
        The declared dependencies, in file order.

    Raises:
        ConfigNotFoundError: If the file does not exist.
        ManifestError: If the YAML is invalid or has structural errors.
    """
    if not os.path.isfile(yaml_path):
        raise ConfigNotFoundError(config_path=yaml_path)

    with open(yaml_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ManifestError(f"Invalid YAML in {yaml_path}: {e}", cause=e) from e

    coordinates = parse_manifest(data)
    _logger.debug("Loaded %d dependencies from %s", len(coordinates), yaml_path)
    return coordinates
