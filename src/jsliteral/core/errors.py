# topmark:header:start
#
#   project      : JsLiteral
#   file         : errors.py
#   file_relpath : src/jsliteral/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the serializer.

The serializer raises synchronously and never catches its own failures: a
failure deep inside a nested record or array propagates unchanged to the
outermost caller. Only `jsliteral.core.result.safe_apply` turns a raised
failure into data.
"""

from __future__ import annotations

from enum import Enum

from jsliteral.core.values import JsFunction, JsSymbol


class SerializationError(Exception):
    """Base class for serialization failures.

    Attributes:
        value (object): The offending value.
    """

    def __init__(self, value: object, message: str | None = None) -> None:
        super().__init__(message or f"Cannot serialize value of type {type(value).__name__}")
        self.value = value


class UnsupportedValue(SerializationError):
    """The value (or a value nested inside it) has no JavaScript expression form.

    Only the innermost unsupported value is reported, not the path to it.
    """


class CyclicValue(SerializationError):
    """A container was reached again while it was still being serialized."""

    def __init__(self, value: object) -> None:
        super().__init__(value, f"Cyclic reference through {type(value).__name__}")


class FailureKind(str, Enum):
    """Coarse shape of a serialization failure, used to pick a diagnostic."""

    SYMBOL = "symbol"
    CALLABLE = "callable"
    CYCLE = "cycle"
    OTHER = "other"


def classify_failure(error: BaseException) -> FailureKind:
    """Return the failure kind for a captured error.

    Args:
        error (BaseException): The error captured by `safe_apply`.

    Returns:
        FailureKind: `FailureKind.OTHER` for anything that is not a
            `SerializationError` about a symbol, a function or a cycle.
    """
    if isinstance(error, CyclicValue):
        return FailureKind.CYCLE
    if isinstance(error, SerializationError):
        if isinstance(error.value, JsSymbol):
            return FailureKind.SYMBOL
        if isinstance(error.value, JsFunction):
            return FailureKind.CALLABLE
    return FailureKind.OTHER
