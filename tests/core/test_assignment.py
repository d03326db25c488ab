# topmark:header:start
#
#   project      : JsLiteral
#   file         : test_assignment.py
#   file_relpath : tests/core/test_assignment.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Guarded ``globalThis`` assignments and their per-side failure reporting."""

from __future__ import annotations

import pytest

from jsliteral import (
    Err,
    JsFunction,
    JsSymbol,
    NamedFunctionPolicy,
    Ok,
    Serializer,
    UnsupportedValue,
    render_global_assignment,
    serialize_global,
)


def test_render_global_assignment() -> None:
    """The statement only defines the global if it is nullish."""
    assert render_global_assignment('"x"', "1") == 'globalThis["x"] ??= 1;'


def test_string_key() -> None:
    """String keys are quoted inside the brackets."""
    outcome = serialize_global("config", {"debug": False})
    assert outcome.failed_side is None
    assert outcome.error is None
    assert outcome.statement == 'globalThis["config"] ??= { debug: false };'


def test_symbol_key() -> None:
    """Registered symbol keys are referenced through the registry."""
    outcome = serialize_global(JsSymbol.for_key("app"), [1])
    assert outcome.statement == 'globalThis[Symbol.for("app")] ??= [1];'


def test_key_failure_skips_the_value() -> None:
    """When the key fails the value is not attempted."""
    key = JsSymbol("local")
    outcome = serialize_global(key, {1, 2})
    assert outcome.failed_side == "key"
    assert isinstance(outcome.key, Err)
    assert outcome.value is None
    assert isinstance(outcome.error, UnsupportedValue)
    assert outcome.error.value is key
    assert outcome.statement is None


def test_value_failure_is_attributed_to_the_value() -> None:
    """A value failure keeps the serialized key for the message."""
    named = JsFunction("function handler() {}")
    outcome = serialize_global(
        "handler", named, Serializer(named_function_policy=NamedFunctionPolicy.REJECT)
    )
    assert outcome.failed_side == "value"
    assert outcome.key == Ok('"handler"')
    assert isinstance(outcome.error, UnsupportedValue)
    assert outcome.error.value is named
    assert outcome.statement is None


def test_invalid_key_type() -> None:
    """Only strings and symbols can name a global."""
    with pytest.raises(TypeError):
        serialize_global(1, "x")  # type: ignore[arg-type]
