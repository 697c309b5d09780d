"""Tests for Config loading and dot-path access."""

from __future__ import annotations

from pathlib import Path

import pytest

from asminclude.config import DEFAULTS, Config
from asminclude.errors import ConfigError, ConfigNotFoundError


class TestConfigDefaults:
    def test_defaults_apply(self) -> None:
        config = Config()
        assert config.get("checker.root_tag") == "assembly"
        assert config.get("checker.strip_whitespace") is True
        assert config.get("checker.problem_message") == (
            "Include pattern doesn't match any dependency"
        )

    def test_override_merges_with_defaults(self) -> None:
        config = Config({"checker": {"problem_message": "no match"}})
        assert config.get("checker.problem_message") == "no match"
        assert config.get("checker.root_tag") == "assembly"

    def test_defaults_are_not_mutated(self) -> None:
        Config({"checker": {"root_tag": "other"}})
        assert DEFAULTS["checker"]["root_tag"] == "assembly"

    def test_missing_key_returns_default(self) -> None:
        config = Config()
        assert config.get("checker.nope") is None
        assert config.get("nope.deeper", 5) == 5


class TestConfigLoad:
    def test_load_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "asminclude.yaml"
        path.write_text("checker:\n  strip_whitespace: false\n")
        config = Config.load(str(path))
        assert config.get("checker.strip_whitespace") is False
        assert config.get("checker.root_tag") == "assembly"

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert Config.load(str(path)).get("checker.root_tag") == "assembly"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigNotFoundError) as exc_info:
            Config.load(str(tmp_path / "missing.yaml"))
        assert exc_info.value.code == "CONFIG_NOT_FOUND"

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("checker: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            Config.load(str(path))

    def test_non_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="must be a mapping"):
            Config.load(str(path))
