"""Dependency coordinates in their canonical colon-joined form."""

from __future__ import annotations

from dataclasses import dataclass

from asminclude.errors import CoordinateError

__all__ = ["Coordinate", "build_coordinate"]


def build_coordinate(
    group_id: str, artifact_id: str, classifier: str | None = None
) -> str:
    """Render ``group:artifact`` or ``group:artifact:classifier``.

    An empty or missing classifier is omitted entirely rather than rendered
    as an empty trailing segment.
    """
    if classifier:
        return f"{group_id}:{artifact_id}:{classifier}"
    return f"{group_id}:{artifact_id}"


@dataclass(frozen=True)
class Coordinate:
    """Identity of a resolved dependency.

    Attributes:
        group_id: Maven groupId.
        artifact_id: Maven artifactId.
        classifier: Optional classifier, e.g. ``tests`` or ``sources``.
    """

    group_id: str
    artifact_id: str
    classifier: str | None = None

    def __str__(self) -> str:
        return build_coordinate(self.group_id, self.artifact_id, self.classifier)

    @classmethod
    def parse(cls, text: str) -> Coordinate:
        """Split a canonical coordinate string back into its parts.

        Segments past the classifier are ignored.

        Raises:
            CoordinateError: If group or artifact is missing.
        """
        parts = text.split(":")
        if len(parts) < 2 or not parts[0] or not parts[1]:
            raise CoordinateError(text)
        classifier = parts[2] if len(parts) > 2 and parts[2] else None
        return cls(group_id=parts[0], artifact_id=parts[1], classifier=classifier)
