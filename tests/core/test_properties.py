# topmark:header:start
#
#   project      : JsLiteral
#   file         : test_properties.py
#   file_relpath : tests/core/test_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property-based round-trip checks.

Strings, finite numbers and arrays of JSON-compatible scalars serialize to
text that is also valid JSON, so `json.loads` can read the value back.
Records round-trip the same way once bare identifier keys are quoted, with
array-index keys moved first as object enumeration orders them.
"""

from __future__ import annotations

import json
import re
from typing import Any

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from jsliteral import serialize
from jsliteral.core.literals import is_array_index

SAFE_INTEGERS = st.integers(min_value=-(2**53), max_value=2**53)

JSON_SCALARS = st.one_of(
    st.none(),
    st.booleans(),
    SAFE_INTEGERS,
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(),
)


@given(st.text())
def test_strings_round_trip(value: str) -> None:
    """Every string reads back unchanged."""
    assert json.loads(serialize(value)) == value


@given(st.floats(allow_nan=False))
def test_floats_round_trip(value: float) -> None:
    """Every non-NaN float reads back to the same number."""
    assert float(serialize(value)) == value


@given(SAFE_INTEGERS)
def test_safe_integers_round_trip(value: int) -> None:
    """Integers within the safe range print without exponent and read back exactly."""
    text: str = serialize(value)
    assert "e" not in text
    assert int(text) == value


@given(st.lists(JSON_SCALARS))
def test_arrays_round_trip(value: list[Any]) -> None:
    """Arrays of JSON scalars read back element by element."""
    assert json.loads(serialize(value)) == value


@given(st.dictionaries(st.text().map(lambda s: "-" + s), JSON_SCALARS))
def test_quoted_key_records_round_trip(value: dict[str, Any]) -> None:
    """Records whose keys all need quoting read back with their key order."""
    loaded: dict[str, Any] = json.loads(serialize(value))
    assert list(loaded.items()) == list(value.items())


IDENTIFIERS = st.from_regex(r"[A-Za-z_$][A-Za-z0-9_$]*", fullmatch=True)
INDEX_KEYS = st.integers(min_value=0, max_value=2**32 - 2).map(str)
# Quoted keys never contain a colon, so `_BARE_KEY_RE` only matches real members.
RECORD_KEYS = st.one_of(
    IDENTIFIERS,
    INDEX_KEYS,
    st.text().filter(lambda k: ":" not in k),
).filter(lambda k: k != "__proto__")

# `{ ` or `, ` followed by a bare key
_BARE_KEY_RE = re.compile(r"(\{ |, )([A-Za-z_$][A-Za-z0-9_$]*):")


def _enumeration_order(record: dict[str, Any]) -> list[tuple[str, Any]]:
    indexes: list[str] = sorted((k for k in record if is_array_index(k)), key=int)
    others: list[str] = [k for k in record if not is_array_index(k)]
    return [(k, record[k]) for k in (*indexes, *others)]


def test_identifier_keys_are_bare() -> None:
    """Identifier keys are emitted without quotes."""
    assert serialize({"a": 1, "b_2": [True], "$x": None}) == "{ a: 1, b_2: [true], $x: null }"


@given(st.dictionaries(RECORD_KEYS, st.one_of(st.none(), st.booleans(), SAFE_INTEGERS)))
def test_records_round_trip_in_enumeration_order(value: dict[str, Any]) -> None:
    """Records read back with every key, in the order objects enumerate them."""
    text: str = _BARE_KEY_RE.sub(r'\1"\2":', serialize(value))
    loaded: dict[str, Any] = json.loads(text)
    assert list(loaded.items()) == _enumeration_order(value)


JSON_VALUES = st.recursive(
    JSON_SCALARS,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(st.text(min_size=1).map(lambda s: " " + s), children, max_size=4),
    ),
    max_leaves=25,
)


@pytest.mark.hypothesis_slow
@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=500,
)
@given(JSON_VALUES)
def test_nested_documents_round_trip(value: Any) -> None:
    """Nested arrays and quoted-key records read back as the same document."""
    assert json.loads(serialize(value)) == value
