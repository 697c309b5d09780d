"""Assembly descriptor checking.

Finds every ``dependencySets/dependencySet/includes/include`` in a
maven-assembly-plugin descriptor and reports the includes that match none
of the project's dependencies.
"""

from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Iterable, Iterator

from asminclude.config import Config
from asminclude.coordinate import Coordinate
from asminclude.errors import DescriptorNotFoundError, DescriptorParseError
from asminclude.matcher import matches_any

__all__ = ["IncludeProblem", "DescriptorChecker"]

_logger = logging.getLogger("asminclude.descriptor")


@dataclass(frozen=True)
class IncludeProblem:
    """An include pattern that matches no dependency.

    Attributes:
        pattern: The include text as written in the descriptor.
        set_index: Zero-based position of the enclosing dependencySet
            across all dependencySets blocks of the document.
        message: Human-readable problem description.
    """

    pattern: str
    set_index: int
    message: str


def _local_name(element: ET.Element) -> str:
    tag = element.tag
    if isinstance(tag, str) and tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


def _children(element: ET.Element, name: str) -> Iterator[ET.Element]:
    return (child for child in element if _local_name(child) == name)


class DescriptorChecker:
    """Checks assembly descriptors against a dependency list.

    Args:
        config: Checker settings; defaults apply when omitted.
    """

    def __init__(self, config: Config | None = None) -> None:
        self._config = config or Config()
        self._message: str = self._config.get("checker.problem_message")
        self._root_tag: str = self._config.get("checker.root_tag")
        self._strip: bool = bool(self._config.get("checker.strip_whitespace"))

    def check_file(
        self, path: str, dependencies: Iterable[Coordinate | str]
    ) -> list[IncludeProblem]:
        """Check a descriptor file.

        Raises:
            DescriptorNotFoundError: If the file does not exist.
            DescriptorParseError: If the file is not well-formed XML.
        """
        if not os.path.isfile(path):
            raise DescriptorNotFoundError(path)
        with open(path, "rb") as f:
            content = f.read()
        return self._check(content, dependencies, source=path)

    def check_text(
        self, xml_text: str | bytes, dependencies: Iterable[Coordinate | str]
    ) -> list[IncludeProblem]:
        """Check descriptor content held in memory.

        The text is parsed with ``xml.etree.ElementTree``, which expands
        internal entities; only pass descriptors from trusted sources.

        Raises:
            DescriptorParseError: If the text is not well-formed XML.
        """
        return self._check(xml_text, dependencies, source=None)

    def include_patterns(self, root: ET.Element) -> Iterator[tuple[int, str]]:
        """Yield ``(set_index, include_text)`` for every include of ``root``."""
        set_index = 0
        for sets in _children(root, "dependencySets"):
            for dependency_set in _children(sets, "dependencySet"):
                for includes in _children(dependency_set, "includes"):
                    for include in _children(includes, "include"):
                        text = include.text or ""
                        yield set_index, text.strip() if self._strip else text
                set_index += 1

    def _check(
        self,
        content: str | bytes,
        dependencies: Iterable[Coordinate | str],
        source: str | None,
    ) -> list[IncludeProblem]:
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise DescriptorParseError(
                f"Malformed assembly descriptor {source or '<text>'}: {e}",
                source=source,
                cause=e,
            ) from e

        if _local_name(root) != self._root_tag:
            _logger.debug("Skipping %s: root is <%s>", source or "<text>", _local_name(root))
            return []

        resolved = [str(d) for d in dependencies]
        problems = [
            IncludeProblem(pattern=pattern, set_index=set_index, message=self._message)
            for set_index, pattern in self.include_patterns(root)
            if not matches_any(pattern, resolved)
        ]
        _logger.debug(
            "Checked %s against %d dependencies: %d problem(s)",
            source or "<text>",
            len(resolved),
            len(problems),
        )
        return problems
