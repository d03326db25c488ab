# topmark:header:start
#
#   project      : JsLiteral
#   file         : assignment.py
#   file_relpath : src/jsliteral/core/assignment.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Guarded ``globalThis`` assignment statements.

A global is defined by serializing its key and its value separately, so a
failure can be attributed to one side, and joining both into::

    globalThis[<key>] ??= <value>;

Finding where to splice the statement into a module is the caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal

from jsliteral.config.logging import get_logger
from jsliteral.core.result import Err, Ok, safe_apply
from jsliteral.core.serializer import DEFAULT_SERIALIZER
from jsliteral.core.values import JsSymbol

if TYPE_CHECKING:
    from jsliteral.config.logging import JsliteralLogger
    from jsliteral.core.result import Result
    from jsliteral.core.serializer import Serializer

logger: JsliteralLogger = get_logger(__name__)


def render_global_assignment(serialized_key: str, serialized_value: str) -> str:
    """Return the guarded assignment statement for already serialized parts."""
    return f"globalThis[{serialized_key}] ??= {serialized_value};"


@dataclass(frozen=True)
class GlobalAssignment:
    """Outcome of serializing a global's key and value.

    Attributes:
        key (Result[str]): Result of serializing the key.
        value (Result[str] | None): Result of serializing the value; None when the
            key already failed and the value was not attempted.
    """

    key: Result[str]
    value: Result[str] | None

    @property
    def failed_side(self) -> Literal["key", "value"] | None:
        """Which side failed, or None on success."""
        if isinstance(self.key, Err):
            return "key"
        if isinstance(self.value, Err):
            return "value"
        return None

    @property
    def error(self) -> Exception | None:
        """The captured error of the failing side, if any."""
        for result in (self.key, self.value):
            if isinstance(result, Err):
                return result.error
        return None

    @property
    def statement(self) -> str | None:
        """The assignment statement, or None if either side failed."""
        if isinstance(self.key, Ok) and isinstance(self.value, Ok):
            return render_global_assignment(self.key.ok, self.value.ok)
        return None


def serialize_global(
    key: str | JsSymbol,
    value: Any,
    serializer: Serializer = DEFAULT_SERIALIZER,
) -> GlobalAssignment:
    """Serialize a global's key and value.

    Args:
        key (str | JsSymbol): The global's key.
        value (Any): The global's value.
        serializer (Serializer): The serializer to use.

    Returns:
        GlobalAssignment: Both results; the value is skipped if the key fails.

    Raises:
        TypeError: If ``key`` is neither a string nor a symbol.
    """
    if type(key) is not str and type(key) is not JsSymbol:
        raise TypeError(f"Global keys must be strings or symbols, got {type(key).__name__}")

    key_result: Result[str] = safe_apply(serializer.serialize, key)
    if isinstance(key_result, Err):
        logger.debug("serialize_global: key %r failed: %s", key, key_result.error)
        return GlobalAssignment(key=key_result, value=None)

    value_result: Result[str] = safe_apply(serializer.serialize, value)
    if isinstance(value_result, Err):
        logger.debug("serialize_global: value for %s failed: %s", key_result.ok, value_result.error)
    return GlobalAssignment(key=key_result, value=value_result)
