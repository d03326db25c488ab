# topmark:header:start
#
#   project      : JsLiteral
#   file         : literals.py
#   file_relpath : src/jsliteral/core/literals.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JavaScript literal grammar for primitive values.

Numbers follow ``Number.prototype.toString`` (shortest round-trip digits,
exponent notation outside ``[1e-7, 1e21)``); strings follow ``JSON.stringify``.
"""

from __future__ import annotations

import json
import math
import re
from decimal import Decimal
from typing import Final, cast

from jsliteral.core.errors import UnsupportedValue

# Largest magnitude at which JavaScript switches to exponent notation.
_MAX_FIXED_EXPONENT: Final[int] = 21
_MIN_FIXED_EXPONENT: Final[int] = -6

_LONE_SURROGATE_RE: Final[re.Pattern[str]] = re.compile("[\ud800-\udfff]")
_IDENTIFIER_NAME_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_$][\w$]*", re.ASCII)
_ARRAY_INDEX_RE: Final[re.Pattern[str]] = re.compile(r"0|[1-9][0-9]*", re.ASCII)
_MAX_ARRAY_INDEX: Final[int] = 2**32 - 2


def format_number(value: int | float) -> str:
    """Return the JavaScript source text of a number.

    Args:
        value (int | float): The number. Integers must be exactly representable
            as an IEEE-754 double.

    Returns:
        str: The literal, e.g. ``"1.1"``, ``"1e+21"``, ``"NaN"`` or ``"-Infinity"``.

    Raises:
        UnsupportedValue: If ``value`` is an integer a JavaScript number cannot hold.
    """
    if isinstance(value, int):
        try:
            as_float: float = float(value)
        except OverflowError as exc:
            raise UnsupportedValue(value, f"Integer {value} overflows a JavaScript number") from exc
        if int(as_float) != value:
            raise UnsupportedValue(value, f"Integer {value} is not exactly representable")
        value = as_float

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        # Covers -0.0 as well: String(-0) is "0".
        return "0"
    if value < 0:
        return "-" + format_number(-value)

    _sign, digit_tuple, raw_exponent = Decimal(repr(value)).normalize().as_tuple()
    # Finite values only reach this point, so the exponent is never "n" or "F".
    exponent: int = cast("int", raw_exponent)
    digits: str = "".join(str(d) for d in digit_tuple)
    k: int = len(digits)
    n: int = exponent + k

    if k <= n <= _MAX_FIXED_EXPONENT:
        return digits + "0" * (n - k)
    if 0 < n <= _MAX_FIXED_EXPONENT:
        return f"{digits[:n]}.{digits[n:]}"
    if _MIN_FIXED_EXPONENT < n <= 0:
        return "0." + "0" * -n + digits

    e: int = n - 1
    suffix: str = f"e{'+' if e >= 0 else '-'}{abs(e)}"
    if k == 1:
        return digits + suffix
    return f"{digits[0]}.{digits[1:]}{suffix}"


def quote_string(value: str) -> str:
    """Return ``value`` as a double-quoted JavaScript string literal.

    Matches ``JSON.stringify``: quotes, backslashes and control characters are
    escaped, lone surrogates become ``\\uXXXX`` escapes, everything else is
    emitted as-is.
    """
    text: str = json.dumps(value, ensure_ascii=False)
    return _LONE_SURROGATE_RE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)


def format_property_key(key: str) -> str:
    """Return the source form of a string key in an object literal.

    ASCII identifier names are emitted bare, anything else is quoted.
    ``__proto__`` is emitted as a computed key: a plain ``__proto__:`` member
    would set the prototype instead of defining an own property.
    """
    if key == "__proto__":
        return f"[{quote_string(key)}]"
    if _IDENTIFIER_NAME_RE.fullmatch(key):
        return key
    return quote_string(key)


def is_array_index(key: str) -> bool:
    """Return True if ``key`` is the canonical form of an array index.

    Objects enumerate such keys (``"0"``, ``"42"``, but not ``"01"`` or
    ``"-1"``) first, in ascending numeric order, before every other string key.
    """
    if len(key) > len(str(_MAX_ARRAY_INDEX)) or not _ARRAY_INDEX_RE.fullmatch(key):
        return False
    return int(key) <= _MAX_ARRAY_INDEX
