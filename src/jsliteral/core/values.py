# topmark:header:start
#
#   project      : JsLiteral
#   file         : values.py
#   file_relpath : src/jsliteral/core/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Python stand-ins for JavaScript-only runtime values.

Plain data (``None``, booleans, numbers, strings, lists and dicts) maps onto
JavaScript directly. The values JavaScript has and Python lacks are modelled
here:

    * ``UNDEFINED``: the ``undefined`` sentinel (single-member enum).
    * ``JsSymbol``: a unique symbol, optionally registered under a key in a
      process-wide registry (``Symbol.for``) or one of the well-known symbols.
    * ``JsFunction``: a callable that carries its literal JavaScript source text.
    * ``JsAccessor``: a getter/setter pair used as a record member.
    * ``FUNCTION_PROTOTYPE``: the built-in "empty callable".

Python has no reflective access to JavaScript source, so functions carry the
text they were written with; the serializer only ever emits that text.
"""

from __future__ import annotations

import re
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Final, Literal

if TYPE_CHECKING:
    from collections.abc import Callable

NATIVE_CODE_MARKER: Final[str] = "[native code]"

# `function foo(`, `async function* foo(`
_FUNCTION_NAME_RE: Final[re.Pattern[str]] = re.compile(
    r"^\s*(?:async\s+)?function\b\s*\*?\s*([A-Za-z_$][\w$]*)\s*\("
)

# `class Foo {`, `class Foo extends Bar {`
_CLASS_RE: Final[re.Pattern[str]] = re.compile(
    r"^\s*class\b\s*(?P<name>(?!extends\b)[A-Za-z_$][\w$]*)?"
)

# Method shorthand: `foo() {}`, `async foo() {}`, `*gen() {}`, `[Symbol.iterator]() {}`.
# `get foo() {}` is an accessor, but `get () {}` is a method named `get`.
_METHOD_SHORTHAND_RE: Final[re.Pattern[str]] = re.compile(
    r"^\s*(?:async\b\s*)?(?:\*\s*)?"
    r"(?!async\b)(?!function\b)(?!class\b)(?!(?:get|set)\s+[\w$\[])"
    r"(?P<name>[A-Za-z_$][\w$]*|\[[^\]]*\])\s*\("
)


class JSUndefined(Enum):
    """Type of the ``undefined`` sentinel."""

    undefined = "undefined"

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> Literal[False]:
        return False


UNDEFINED: Final = JSUndefined.undefined


@dataclass(frozen=True, eq=False)
class JsSymbol:
    """A JavaScript symbol.

    Symbols compare by identity. Registered symbols are interned, so two calls
    to `for_key` with the same key return the same object, as ``Symbol.for``
    does in JavaScript.

    Attributes:
        description (str | None): Optional human-readable description.
        key (str | None): Registry key for symbols created by `for_key`.
        well_known (bool): Whether this is one of the engine's well-known symbols.
    """

    description: str | None = None
    key: str | None = field(default=None, kw_only=True)
    well_known: bool = field(default=False, kw_only=True)

    _registry: ClassVar[dict[str, JsSymbol]] = {}
    _registry_lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def for_key(cls, key: str) -> JsSymbol:
        """Return the registered symbol for ``key``, creating it on first use.

        Args:
            key (str): The registry key.

        Returns:
            JsSymbol: The interned symbol registered under ``key``.

        Raises:
            TypeError: If ``key`` is not a string.
        """
        if not isinstance(key, str):
            raise TypeError(f"Symbol registry keys must be strings, got {type(key).__name__}")
        with cls._registry_lock:
            symbol: JsSymbol | None = cls._registry.get(key)
            if symbol is None:
                symbol = cls(key, key=key)
                cls._registry[key] = symbol
            return symbol

    @staticmethod
    def key_for(symbol: JsSymbol) -> str | None:
        """Return the registry key of ``symbol``, or None if it is not registered."""
        return symbol.key

    @staticmethod
    def well_known_symbol(name: str) -> JsSymbol:
        """Return the well-known symbol ``Symbol.<name>``.

        Raises:
            KeyError: If ``name`` is not a well-known symbol.
        """
        return WELL_KNOWN_SYMBOLS[name]

    def __repr__(self) -> str:
        if self.key is not None:
            return f"Symbol.for({self.key!r})"
        if self.description is None:
            return "Symbol()"
        return f"Symbol({self.description!r})"


WELL_KNOWN_SYMBOLS: Final[dict[str, JsSymbol]] = {
    name: JsSymbol(f"Symbol.{name}", well_known=True)
    for name in (
        "asyncIterator",
        "hasInstance",
        "isConcatSpreadable",
        "iterator",
        "match",
        "matchAll",
        "replace",
        "search",
        "species",
        "split",
        "toPrimitive",
        "toStringTag",
        "unscopables",
    )
}


def declared_function_name(source: str) -> str:
    """Return the name declared by a function's source text, or ``""``.

    Recognizes ``function`` expressions/declarations (including async and
    generator forms), ``class`` expressions and method shorthand. Arrow
    functions and ``class extends Base {}`` are anonymous.
    """
    match: re.Match[str] | None = _FUNCTION_NAME_RE.match(source)
    if match:
        return match.group(1)
    match = _CLASS_RE.match(source)
    if match:
        return match.group("name") or ""
    match = _METHOD_SHORTHAND_RE.match(source)
    if match and not match.group("name").startswith("["):
        return match.group("name")
    return ""


def is_method_shorthand(source: str) -> bool:
    """Return True if ``source`` is written in object method shorthand.

    Method shorthand already spells the member key (``foo() {}``), so it is
    emitted in a record without a ``key:`` prefix.
    """
    return _METHOD_SHORTHAND_RE.match(source) is not None


@dataclass(frozen=True, eq=False)
class JsFunction:
    """A callable carrying its JavaScript source text.

    Attributes:
        source (str): The function literal exactly as authored, e.g. ``"(x) => x * 2"``.
        name (str): The function's bound name. Defaults to the name declared in
            ``source``, or ``""`` for anonymous functions.
        impl (Callable[..., Any] | None): Optional Python implementation used when
            the value is called from Python.
    """

    source: str
    name: str = ""
    impl: Callable[..., Any] | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.source, str):
            raise TypeError(f"Function source must be a string, got {type(self.source).__name__}")
        if not self.name:
            object.__setattr__(self, "name", declared_function_name(self.source))

    @classmethod
    def native(cls, name: str) -> JsFunction:
        """Return a native (built-in) function referenced by ``name``.

        Args:
            name (str): The global name of the built-in, e.g. ``"Object"``.

        Returns:
            JsFunction: A function whose source text is the native-code marker.
        """
        return cls(f"function {name}() {{ {NATIVE_CODE_MARKER} }}", name=name)

    @property
    def is_native(self) -> bool:
        """Whether the source text is the native-code marker rather than real source."""
        return NATIVE_CODE_MARKER in self.source

    @property
    def is_class(self) -> bool:
        """Whether the source is a ``class`` expression rather than a function."""
        return _CLASS_RE.match(self.source) is not None

    @property
    def is_named(self) -> bool:
        """Whether the function has a bound name."""
        return bool(self.name)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if self.impl is None:
            label: str = self.name or "<anonymous>"
            raise TypeError(f"JavaScript function {label} has no Python implementation")
        return self.impl(*args, **kwargs)

    def __str__(self) -> str:
        return self.source


FUNCTION_PROTOTYPE: Final[JsFunction] = JsFunction(f"function () {{ {NATIVE_CODE_MARKER} }}")


def javascript(source: str, *, name: str = "") -> Callable[[Callable[..., Any]], JsFunction]:
    """Decorator attaching JavaScript source text to a Python function.

    The decorated object stays callable from Python and serializes to
    ``source``::

        @javascript("(a, b) => a + b")
        def add(a, b):
            return a + b

    Args:
        source (str): The JavaScript function literal.
        name (str): Optional bound name overriding the one declared in ``source``.

    Returns:
        Callable[[Callable[..., Any]], JsFunction]: The decorator.
    """

    def _decorator(func: Callable[..., Any]) -> JsFunction:
        return JsFunction(source, name=name, impl=func)

    return _decorator


@dataclass(frozen=True)
class JsAccessor:
    """An accessor pair used as a record member.

    Each side holds the verbatim source of the accessor, including the ``get``
    or ``set`` keyword and the member key (``"get foo() { return 1 }"``).

    Raises:
        ValueError: If neither side is given.
    """

    get: str | None = None
    set: str | None = None

    def __post_init__(self) -> None:
        if self.get is None and self.set is None:
            raise ValueError("An accessor needs a getter, a setter, or both")
