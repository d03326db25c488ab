# topmark:header:start
#
#   project      : JsLiteral
#   file         : loaders.py
#   file_relpath : src/jsliteral/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Discover and load TOML configuration sources.

Configuration lives either in ``jsliteral.toml`` or under ``[tool.jsliteral]``
in ``pyproject.toml``. Discovery walks from a start directory up to the
filesystem root and stops at the first directory holding either source
(``jsliteral.toml`` wins over ``pyproject.toml`` in the same directory).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from jsliteral.config.logging import get_logger
from jsliteral.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_PATH

if TYPE_CHECKING:
    from pathlib import Path

    from jsliteral.config.logging import JsliteralLogger

TomlTable = dict[str, Any]

logger: JsliteralLogger = get_logger(__name__)


class ConfigError(ValueError):
    """A configuration source is missing, unreadable or malformed."""


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed, unwrapped document.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    data: Any = doc.unwrap()
    logger.debug("Loaded TOML from %s", path)
    return cast("TomlTable", data)


def _pyproject_tool_table(doc: TomlTable) -> TomlTable | None:
    table: Any = doc
    for part in PYPROJECT_TOOL_PATH:
        if not isinstance(table, dict) or part not in table:
            return None
        table = cast("TomlTable", table)[part]
    return cast("TomlTable", table) if isinstance(table, dict) else None


def load_config_table(path: Path) -> TomlTable:
    """Return the JsLiteral table of a configuration file.

    For ``pyproject.toml`` this is ``[tool.jsliteral]`` (empty if absent); for
    any other file it is the whole document.

    Raises:
        ConfigError: If the file cannot be loaded.
    """
    doc: TomlTable = load_toml_dict(path)
    if path.name == PYPROJECT_FILE_NAME:
        return _pyproject_tool_table(doc) or {}
    return doc


def discover_config_file(start: Path) -> Path | None:
    """Return the nearest configuration file at or above ``start``.

    A ``pyproject.toml`` only counts when it has a ``[tool.jsliteral]`` table.
    Unreadable ``pyproject.toml`` files are logged and skipped.

    Args:
        start (Path): Directory to start from.

    Returns:
        Path | None: The configuration file, or None if there is none.
    """
    for directory in (start, *start.parents):
        candidate: Path = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            logger.info("Using configuration %s", candidate)
            return candidate

        pyproject: Path = directory / PYPROJECT_FILE_NAME
        if not pyproject.is_file():
            continue
        try:
            doc: TomlTable = load_toml_dict(pyproject)
        except ConfigError as exc:
            logger.warning("Skipping %s: %s", pyproject, exc)
            continue
        if _pyproject_tool_table(doc) is not None:
            logger.info("Using configuration [tool.jsliteral] in %s", pyproject)
            return pyproject

    logger.debug("No configuration found from %s upwards", start)
    return None


def to_toml(table: TomlTable) -> str:
    """Serialize a TOML mapping to a string."""
    return tomlkit.dumps(table)
