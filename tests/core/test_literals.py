# topmark:header:start
#
#   project      : JsLiteral
#   file         : test_literals.py
#   file_relpath : tests/core/test_literals.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Primitive literals: undefined, null, booleans, numbers and strings.

Number output follows ``Number.prototype.toString`` (shortest round-trip
digits, exponent notation from 1e21 and below 1e-6). String output follows
``JSON.stringify``.
"""

from __future__ import annotations

import math

import pytest

from jsliteral import UNDEFINED, UnsupportedValue, serialize
from jsliteral.core.literals import format_property_key, is_array_index, quote_string
from tests.conftest import parametrize


def test_undefined_null_and_booleans() -> None:
    """The four JavaScript primitives without a payload map to their keywords."""
    assert serialize(UNDEFINED) == "undefined"
    assert serialize(None) == "null"
    assert serialize(True) == "true"
    assert serialize(False) == "false"


@parametrize(
    "value, expected",
    [
        (0, "0"),
        (1, "1"),
        (-7, "-7"),
        (100, "100"),
        (1.1, "1.1"),
        (-1.5, "-1.5"),
        (0.1 + 0.2, "0.30000000000000004"),
        (0.000001, "0.000001"),
        (1e-7, "1e-7"),
        (1.5e-7, "1.5e-7"),
        (1e21, "1e+21"),
        (1.2345678901234568e20, "123456789012345680000"),
        (2.5e22, "2.5e+22"),
        (2**53, "9007199254740992"),
        (-0.0, "0"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
        (math.nan, "NaN"),
    ],
)
def test_numbers(value: float, expected: str) -> None:
    """Numbers are formatted the way JavaScript prints them."""
    assert serialize(value) == expected


@parametrize("value", [2**53 + 1, -(2**53) - 1, 10**400])
def test_integers_without_an_exact_double_are_unsupported(value: int) -> None:
    """Integers a JavaScript number cannot hold exactly are rejected, not rounded."""
    with pytest.raises(UnsupportedValue) as excinfo:
        serialize(value)
    assert excinfo.value.value == value


@parametrize(
    "value, expected",
    [
        ("", '""'),
        ("foo", '"foo"'),
        ('foo"bar', '"foo\\"bar"'),
        ("foo\nbar", '"foo\\nbar"'),
        ("back\\slash", '"back\\\\slash"'),
        ("'\"`", '"\'\\"`"'),
        ("\x00", '"\\u0000"'),
        ("héllo ✓", '"héllo ✓"'),
        ("\ud800", '"\\ud800"'),
    ],
)
def test_strings(value: str, expected: str) -> None:
    """Strings are double-quoted with JSON escaping; lone surrogates are escaped."""
    assert serialize(value) == expected
    assert quote_string(value) == expected


@parametrize(
    "key, expected",
    [
        ("foo", "foo"),
        ("$el", "$el"),
        ("_private", "_private"),
        ("camelCase2", "camelCase2"),
        ("foo-bar", '"foo-bar"'),
        ("1", '"1"'),
        ("", '""'),
        ("with space", '"with space"'),
        ("é", '"é"'),
        ("__proto__", '["__proto__"]'),
    ],
)
def test_property_keys(key: str, expected: str) -> None:
    """Identifier keys stay bare, others are quoted, ``__proto__`` is computed."""
    assert format_property_key(key) == expected


@parametrize(
    "key, expected",
    [
        ("0", True),
        ("42", True),
        ("4294967294", True),
        ("4294967295", False),
        ("01", False),
        ("-1", False),
        ("1.5", False),
        ("1e3", False),
        ("", False),
        ("٣", False),
        ("9" * 5000, False),
    ],
)
def test_array_index_keys(key: str, expected: bool) -> None:
    """Only canonical integers up to 2**32 - 2 are array indexes."""
    assert is_array_index(key) is expected
