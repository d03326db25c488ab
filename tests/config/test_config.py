# topmark:header:start
#
#   project      : JsLiteral
#   file         : test_config.py
#   file_relpath : tests/config/test_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration loading, discovery, validation and export.

Each test writes its sources under ``tmp_path`` so discovery never reaches the
repository's own ``pyproject.toml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from jsliteral import JsFunction, NamedFunctionPolicy, UnsupportedValue
from jsliteral.config.loaders import (
    ConfigError,
    discover_config_file,
    load_config_table,
    load_toml_dict,
    to_toml,
)
from jsliteral.config.model import JsliteralConfig
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults() -> None:
    """Without a source the permissive defaults apply."""
    config = JsliteralConfig()
    assert config.named_function_policy is NamedFunctionPolicy.ACCEPT
    assert config.detect_cycles is True
    assert config.source is None
    assert JsliteralConfig.from_toml_dict({}) == config


def test_from_toml_dict() -> None:
    """Known keys are read from the ``[serializer]`` table."""
    config = JsliteralConfig.from_toml_dict(
        {"serializer": {"named_function_policy": "reject", "detect_cycles": False}}
    )
    assert config.named_function_policy is NamedFunctionPolicy.REJECT
    assert config.detect_cycles is False


def test_unknown_keys_are_ignored() -> None:
    """Unknown sections and keys are logged, not fatal."""
    config = JsliteralConfig.from_toml_dict(
        {"serializer": {"indent": 2}, "output": {"color": True}}
    )
    assert config == JsliteralConfig()


@parametrize(
    "table, fragment",
    [
        ({"serializer": "reject"}, "must be a table"),
        ({"serializer": {"named_function_policy": "maybe"}}, "allowed: accept, reject"),
        ({"serializer": {"named_function_policy": 1}}, "named_function_policy"),
        ({"serializer": {"detect_cycles": "yes"}}, "must be a boolean"),
    ],
)
def test_invalid_values(table: dict[str, Any], fragment: str) -> None:
    """Invalid values for known keys are configuration errors."""
    with pytest.raises(ConfigError, match=fragment):
        JsliteralConfig.from_toml_dict(table)


def test_load_jsliteral_toml(tmp_path: Path) -> None:
    """A ``jsliteral.toml`` file is read as a whole."""
    path: Path = tmp_path / "jsliteral.toml"
    path.write_text('[serializer]\nnamed_function_policy = "reject"\n', encoding="utf-8")

    config = JsliteralConfig.load(path)
    assert config.named_function_policy is NamedFunctionPolicy.REJECT
    assert config.source == path


def test_load_pyproject_tool_table(tmp_path: Path) -> None:
    """In ``pyproject.toml`` only ``[tool.jsliteral]`` is read."""
    path: Path = tmp_path / "pyproject.toml"
    path.write_text(
        '[project]\nname = "demo"\n\n[tool.jsliteral.serializer]\ndetect_cycles = false\n',
        encoding="utf-8",
    )
    assert load_config_table(path) == {"serializer": {"detect_cycles": False}}
    assert JsliteralConfig.load(path).detect_cycles is False


def test_load_invalid_toml(tmp_path: Path) -> None:
    """Malformed TOML is a configuration error naming the file."""
    path: Path = tmp_path / "jsliteral.toml"
    path.write_text("[serializer\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_toml_dict(path)


def test_load_missing_file(tmp_path: Path) -> None:
    """A missing file is a configuration error."""
    with pytest.raises(ConfigError, match="Cannot read"):
        JsliteralConfig.load(tmp_path / "missing.toml")


def test_discover_walks_up(tmp_path: Path) -> None:
    """Discovery finds the nearest ``jsliteral.toml`` above the start directory."""
    (tmp_path / "jsliteral.toml").write_text("[serializer]\n", encoding="utf-8")
    nested: Path = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert discover_config_file(nested) == tmp_path / "jsliteral.toml"


def test_discover_prefers_jsliteral_toml(tmp_path: Path) -> None:
    """``jsliteral.toml`` wins over ``pyproject.toml`` in the same directory."""
    (tmp_path / "jsliteral.toml").write_text("", encoding="utf-8")
    (tmp_path / "pyproject.toml").write_text("[tool.jsliteral]\n", encoding="utf-8")

    assert discover_config_file(tmp_path) == tmp_path / "jsliteral.toml"


def test_discover_skips_pyproject_without_tool_table(tmp_path: Path) -> None:
    """A ``pyproject.toml`` without ``[tool.jsliteral]`` does not stop discovery."""
    (tmp_path / "jsliteral.toml").write_text("", encoding="utf-8")
    child: Path = tmp_path / "child"
    child.mkdir()
    (child / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")

    assert discover_config_file(child) == tmp_path / "jsliteral.toml"


def test_discover_skips_broken_pyproject(tmp_path: Path) -> None:
    """An unparsable ``pyproject.toml`` is skipped with a warning."""
    (tmp_path / "jsliteral.toml").write_text("", encoding="utf-8")
    child: Path = tmp_path / "child"
    child.mkdir()
    (child / "pyproject.toml").write_text("[tool\n", encoding="utf-8")

    assert discover_config_file(child) == tmp_path / "jsliteral.toml"


def test_discover_uses_pyproject_tool_table(tmp_path: Path) -> None:
    """A ``pyproject.toml`` with ``[tool.jsliteral]`` is a configuration source."""
    (tmp_path / "pyproject.toml").write_text(
        '[tool.jsliteral.serializer]\nnamed_function_policy = "reject"\n', encoding="utf-8"
    )
    config = JsliteralConfig.discover(tmp_path)
    assert config.source == tmp_path / "pyproject.toml"
    assert config.named_function_policy is NamedFunctionPolicy.REJECT


def test_with_overrides() -> None:
    """Only non-None overrides replace values."""
    config = JsliteralConfig(detect_cycles=False)
    assert config.with_overrides() == config
    overridden = config.with_overrides(named_function_policy=NamedFunctionPolicy.REJECT)
    assert overridden.named_function_policy is NamedFunctionPolicy.REJECT
    assert overridden.detect_cycles is False
    assert config.with_overrides(detect_cycles=True).detect_cycles is True


def test_export_round_trips() -> None:
    """The exported table reads back into the same settings."""
    config = JsliteralConfig(named_function_policy=NamedFunctionPolicy.REJECT, detect_cycles=False)
    table = config.to_toml_dict()
    assert JsliteralConfig.from_toml_dict(table) == config

    text: str = to_toml(table)
    assert "[serializer]" in text
    assert 'named_function_policy = "reject"' in text
    assert "detect_cycles = false" in text


def test_build_serializer() -> None:
    """The configuration is what turns into a `Serializer`."""
    named = JsFunction("function foo() {}")
    assert JsliteralConfig().build_serializer().serialize(named) == "function foo() {}"

    rejecting = JsliteralConfig(named_function_policy=NamedFunctionPolicy.REJECT)
    with pytest.raises(UnsupportedValue):
        rejecting.build_serializer().serialize(named)
