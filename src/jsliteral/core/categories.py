# topmark:header:start
#
#   project      : JsLiteral
#   file         : categories.py
#   file_relpath : src/jsliteral/core/categories.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Closed set of value categories the serializer dispatches on.

A value's category is decided once, by `categorize`, in the precedence order
of `ValueCategory`. Type checks are exact: subclasses of ``dict``, ``list``,
``str`` or ``int`` are class instances and therefore `ValueCategory.UNSUPPORTED`.
"""

from __future__ import annotations

from enum import Enum

from jsliteral.core.values import JSUndefined, JsFunction, JsSymbol


class ValueCategory(Enum):
    """Category of a value, in dispatch precedence order."""

    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    CALLABLE = "callable"
    SYMBOL = "symbol"
    RECORD = "record"
    UNSUPPORTED = "unsupported"


def categorize(value: object) -> ValueCategory:
    """Return the category of ``value``."""
    value_type: type = type(value)
    if value_type is JSUndefined:
        return ValueCategory.UNDEFINED
    if value is None:
        return ValueCategory.NULL
    if value_type is bool:
        return ValueCategory.BOOLEAN
    if value_type is int or value_type is float:
        return ValueCategory.NUMBER
    if value_type is str:
        return ValueCategory.STRING
    if value_type is list or value_type is tuple:
        return ValueCategory.SEQUENCE
    if value_type is JsFunction:
        return ValueCategory.CALLABLE
    if value_type is JsSymbol:
        return ValueCategory.SYMBOL
    if value_type is dict:
        return ValueCategory.RECORD
    return ValueCategory.UNSUPPORTED
