# topmark:header:start
#
#   project      : JsLiteral
#   file         : result.py
#   file_relpath : src/jsliteral/core/result.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Success/failure results for operations that raise."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Literal, TypeVar, Union

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")
I = TypeVar("I")  # noqa: E741


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result holding the returned value."""

    ok: T

    @property
    def is_ok(self) -> Literal[True]:
        return True


@dataclass(frozen=True)
class Err:
    """Failed result holding the exact exception that was raised."""

    error: Exception

    @property
    def is_ok(self) -> Literal[False]:
        return False


Result = Union[Ok[T], Err]


def safe_apply(fn: Callable[[I], T], value: I) -> Result[T]:
    """Call ``fn(value)`` and capture its outcome.

    Args:
        fn (Callable[[I], T]): The operation to run.
        value (I): Its single argument.

    Returns:
        Result[T]: ``Ok(result)`` on a normal return, or ``Err(error)`` holding
            the raised exception object itself (not a copy or a wrapper).
    """
    try:
        return Ok(fn(value))
    except Exception as exc:  # noqa: BLE001
        return Err(exc)
