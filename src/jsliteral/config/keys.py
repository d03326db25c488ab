# topmark:header:start
#
#   project      : JsLiteral
#   file         : keys.py
#   file_relpath : src/jsliteral/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML section and key names of the JsLiteral configuration.

The same schema is read from ``jsliteral.toml`` (top-level tables) and from
``[tool.jsliteral]`` in ``pyproject.toml``. Renaming a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys."""

    # [serializer]
    SECTION_SERIALIZER: Final[str] = "serializer"

    KEY_NAMED_FUNCTION_POLICY: Final[str] = "named_function_policy"
    KEY_DETECT_CYCLES: Final[str] = "detect_cycles"
