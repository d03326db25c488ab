# topmark:header:start
#
#   project      : JsLiteral
#   file         : __init__.py
#   file_relpath : src/jsliteral/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core serializer: value model, categories, literal grammar and results.

This package has no I/O and no configuration lookups; everything it needs is
passed in explicitly.
"""

from __future__ import annotations

from jsliteral.core.assignment import GlobalAssignment, render_global_assignment, serialize_global
from jsliteral.core.categories import ValueCategory, categorize
from jsliteral.core.errors import (
    CyclicValue,
    FailureKind,
    SerializationError,
    UnsupportedValue,
    classify_failure,
)
from jsliteral.core.policy import NamedFunctionPolicy
from jsliteral.core.result import Err, Ok, Result, safe_apply
from jsliteral.core.serializer import DEFAULT_SERIALIZER, Serializer, serialize
from jsliteral.core.values import (
    FUNCTION_PROTOTYPE,
    UNDEFINED,
    WELL_KNOWN_SYMBOLS,
    JsAccessor,
    JsFunction,
    JSUndefined,
    JsSymbol,
    javascript,
)

__all__ = [
    "DEFAULT_SERIALIZER",
    "FUNCTION_PROTOTYPE",
    "UNDEFINED",
    "WELL_KNOWN_SYMBOLS",
    "CyclicValue",
    "Err",
    "FailureKind",
    "GlobalAssignment",
    "JSUndefined",
    "JsAccessor",
    "JsFunction",
    "JsSymbol",
    "NamedFunctionPolicy",
    "Ok",
    "Result",
    "SerializationError",
    "Serializer",
    "UnsupportedValue",
    "ValueCategory",
    "categorize",
    "classify_failure",
    "javascript",
    "render_global_assignment",
    "safe_apply",
    "serialize",
    "serialize_global",
]
