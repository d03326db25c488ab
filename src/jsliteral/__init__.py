# topmark:header:start
#
#   project      : JsLiteral
#   file         : __init__.py
#   file_relpath : src/jsliteral/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsLiteral package.

JsLiteral renders Python values as JavaScript expression source text that
evaluates back to an equivalent value. JavaScript-only values (``undefined``,
symbols, functions carrying their source, accessor pairs) are modelled by the
types re-exported here. A small CLI (``jsliteral``) serializes JSON and TOML
documents.
"""

from __future__ import annotations

from jsliteral.core import (
    FUNCTION_PROTOTYPE,
    UNDEFINED,
    WELL_KNOWN_SYMBOLS,
    CyclicValue,
    Err,
    GlobalAssignment,
    JsAccessor,
    JsFunction,
    JSUndefined,
    JsSymbol,
    NamedFunctionPolicy,
    Ok,
    SerializationError,
    Serializer,
    UnsupportedValue,
    javascript,
    render_global_assignment,
    safe_apply,
    serialize,
    serialize_global,
)

__all__ = [
    "FUNCTION_PROTOTYPE",
    "UNDEFINED",
    "WELL_KNOWN_SYMBOLS",
    "CyclicValue",
    "Err",
    "GlobalAssignment",
    "JSUndefined",
    "JsAccessor",
    "JsFunction",
    "JsSymbol",
    "NamedFunctionPolicy",
    "Ok",
    "SerializationError",
    "Serializer",
    "UnsupportedValue",
    "javascript",
    "render_global_assignment",
    "safe_apply",
    "serialize",
    "serialize_global",
]
