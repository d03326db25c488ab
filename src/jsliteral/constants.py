# topmark:header:start
#
#   project      : JsLiteral
#   file         : constants.py
#   file_relpath : src/jsliteral/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsLiteral Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    JSLITERAL_VERSION: str = get_version("jsliteral")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    JSLITERAL_VERSION = "0.0.0"

CONFIG_FILE_NAME: str = "jsliteral.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"

# Path of the JsLiteral table inside `pyproject.toml`.
PYPROJECT_TOOL_PATH: tuple[str, str] = ("tool", "jsliteral")
