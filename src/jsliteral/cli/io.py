# topmark:header:start
#
#   project      : JsLiteral
#   file         : io.py
#   file_relpath : src/jsliteral/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read input documents for the CLI.

Input is a JSON or TOML document from a file or from STDIN (``-``). Read and
parse failures are mapped onto CLI errors with matching exit codes.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any

import click
import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from jsliteral.cli.errors import (
    JsliteralDataError,
    JsliteralFileNotFoundError,
    JsliteralIOError,
    JsliteralPermissionDeniedError,
)
from jsliteral.config.logging import get_logger

logger = get_logger(__name__)

STDIN_MARKER: str = "-"


class InputFormat(str, Enum):
    """Supported input document formats."""

    JSON = "json"
    TOML = "toml"


def detect_format(source: str, explicit: InputFormat | None) -> InputFormat:
    """Return ``explicit`` if given, else TOML for ``*.toml`` paths and JSON otherwise."""
    if explicit is not None:
        return explicit
    if source != STDIN_MARKER and Path(source).suffix.lower() == ".toml":
        return InputFormat.TOML
    return InputFormat.JSON


def read_input_text(source: str) -> str:
    """Return the text of ``source`` (a path, or ``-`` for STDIN).

    Raises:
        JsliteralFileNotFoundError: If the path does not exist.
        JsliteralPermissionDeniedError: If the path is not readable.
        JsliteralIOError: For other read errors.
        JsliteralDataError: If the content is not valid UTF-8.
    """
    if source == STDIN_MARKER:
        return click.get_text_stream("stdin").read()

    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise JsliteralFileNotFoundError(f"Input not found: {source}") from exc
    except PermissionError as exc:
        raise JsliteralPermissionDeniedError(f"Permission denied: {source}") from exc
    except UnicodeDecodeError as exc:
        raise JsliteralDataError(f"Input is not valid UTF-8: {source} ({exc.reason})") from exc
    except OSError as exc:
        raise JsliteralIOError(f"Cannot read {source}: {exc}") from exc


def parse_document(text: str, fmt: InputFormat, *, source: str = STDIN_MARKER) -> Any:
    """Parse ``text`` as ``fmt`` into plain Python values.

    Raises:
        JsliteralDataError: If the text is not a valid document.
    """
    name: str = "<stdin>" if source == STDIN_MARKER else source
    if fmt is InputFormat.TOML:
        try:
            return tomlkit.parse(text).unwrap()
        except TomlkitParseError as exc:
            raise JsliteralDataError(f"Invalid TOML in {name}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise JsliteralDataError(f"Invalid JSON in {name}: {exc}") from exc


def load_input(source: str, fmt: InputFormat | None) -> Any:
    """Read and parse ``source``, detecting the format when ``fmt`` is None."""
    effective: InputFormat = detect_format(source, fmt)
    logger.debug("Reading %s as %s", source, effective.value)
    return parse_document(read_input_text(source), effective, source=source)
