# topmark:header:start
#
#   project      : JsLiteral
#   file         : serializer.py
#   file_relpath : src/jsliteral/core/serializer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serialize Python values into JavaScript expression source text.

`Serializer.serialize` maps a value onto the text of a JavaScript expression
that evaluates to an equivalent value. Each value is categorized once (see
`jsliteral.core.categories`) and rendered by the handler registered for its
category in `_RENDERERS`; every category has exactly one handler.

Examples:
    ```python
    from jsliteral import JsSymbol, serialize

    serialize([1, {"a": 21, JsSymbol.for_key("abc"): None}])
    # '[1, { a: 21, [Symbol.for("abc")]: null }]'
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from jsliteral.config.logging import get_logger
from jsliteral.core.categories import ValueCategory, categorize
from jsliteral.core.errors import CyclicValue, UnsupportedValue
from jsliteral.core.literals import (
    format_number,
    format_property_key,
    is_array_index,
    quote_string,
)
from jsliteral.core.policy import NamedFunctionPolicy
from jsliteral.core.values import (
    FUNCTION_PROTOTYPE,
    JsAccessor,
    JsFunction,
    JsSymbol,
    is_method_shorthand,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from jsliteral.config.logging import JsliteralLogger

logger: JsliteralLogger = get_logger(__name__)

# ids of the containers on the current recursion path
_Path = set[int]


@dataclass(frozen=True)
class Serializer:
    """Stateless JavaScript expression serializer.

    Attributes:
        named_function_policy (NamedFunctionPolicy): Whether named functions are
            emitted or rejected.
        detect_cycles (bool): Fail with `CyclicValue` when a container is
            reached again while being serialized. When False, cyclic input
            recurses until Python raises ``RecursionError``.
    """

    named_function_policy: NamedFunctionPolicy = NamedFunctionPolicy.ACCEPT
    detect_cycles: bool = True

    def serialize(self, value: Any) -> str:
        """Return the JavaScript expression for ``value``.

        Args:
            value (Any): The value to serialize.

        Returns:
            str: A JavaScript expression evaluating to an equivalent value.

        Raises:
            UnsupportedValue: If ``value`` or a value nested in it has no
                expression form (the innermost such value is reported).
            CyclicValue: If ``value`` contains itself and cycle detection is on.
        """
        return self._serialize(value, set())

    def _serialize(self, value: Any, path: _Path) -> str:
        category: ValueCategory = categorize(value)
        logger.trace("serialize: %s (%s)", category.value, type(value).__name__)
        return _RENDERERS[category](self, value, path)

    def _enter(self, container: object, path: _Path) -> None:
        if not self.detect_cycles:
            return
        if id(container) in path:
            logger.debug("serialize: cycle through %s", type(container).__name__)
            raise CyclicValue(container)
        path.add(id(container))

    def _leave(self, container: object, path: _Path) -> None:
        if self.detect_cycles:
            path.discard(id(container))

    # --- Category handlers ---

    def _render_undefined(self, value: Any, path: _Path) -> str:
        return "undefined"

    def _render_null(self, value: Any, path: _Path) -> str:
        return "null"

    def _render_boolean(self, value: bool, path: _Path) -> str:
        return "true" if value else "false"

    def _render_number(self, value: int | float, path: _Path) -> str:
        return format_number(value)

    def _render_string(self, value: str, path: _Path) -> str:
        return quote_string(value)

    def _render_sequence(self, value: list[Any] | tuple[Any, ...], path: _Path) -> str:
        self._enter(value, path)
        try:
            return "[" + ", ".join(self._serialize(item, path) for item in value) + "]"
        finally:
            self._leave(value, path)

    def _render_callable(self, value: JsFunction, path: _Path) -> str:
        if value is FUNCTION_PROTOTYPE:
            return "Function.prototype"
        if value.is_native:
            if not value.name:
                logger.debug("serialize: native function without a name")
                raise UnsupportedValue(value, "Native function has no name to reference it by")
            return value.name
        if value.is_class:
            logger.debug("serialize: class %r rejected", value.name or "<anonymous>")
            raise UnsupportedValue(value, "Classes cannot be serialized")
        if value.is_named and self.named_function_policy is NamedFunctionPolicy.REJECT:
            logger.debug("serialize: named function %r rejected by policy", value.name)
            raise UnsupportedValue(value, f"Named function {value.name!r} is not allowed")
        return value.source

    def _render_symbol(self, value: JsSymbol, path: _Path) -> str:
        key: str | None = JsSymbol.key_for(value)
        if key is not None:
            return f"Symbol.for({quote_string(key)})"
        if value.well_known and value.description:
            return value.description
        logger.debug("serialize: unregistered symbol %r", value)
        raise UnsupportedValue(value, f"{value!r} is not registered")

    def _render_record(self, value: dict[Any, Any], path: _Path) -> str:
        index_keys: list[str] = []
        string_keys: list[str] = []
        symbol_keys: list[JsSymbol] = []
        for key in value:
            if type(key) is str:
                (index_keys if is_array_index(key) else string_keys).append(key)
            elif type(key) is JsSymbol:
                symbol_keys.append(key)
            else:
                raise UnsupportedValue(
                    key, f"Record keys must be strings or symbols, got {type(key).__name__}"
                )

        # Emit keys in the order the evaluated object enumerates them.
        index_keys.sort(key=int)
        self._enter(value, path)
        try:
            members: list[str] = [
                self._render_member(key, value[key], path)
                for key in (*index_keys, *string_keys, *symbol_keys)
            ]
        finally:
            self._leave(value, path)

        if not members:
            return "{}"
        return "{ " + ", ".join(members) + " }"

    def _render_member(self, key: str | JsSymbol, member: Any, path: _Path) -> str:
        if type(member) is JsAccessor:
            return ", ".join(text for text in (member.get, member.set) if text is not None)

        rendered: str = self._serialize(member, path)
        if type(member) is JsFunction and not member.is_native and is_method_shorthand(rendered):
            # The shorthand source already spells the key.
            return rendered

        if isinstance(key, JsSymbol):
            return f"[{self._serialize(key, path)}]: {rendered}"
        return f"{format_property_key(key)}: {rendered}"

    def _render_unsupported(self, value: Any, path: _Path) -> str:
        logger.debug("serialize: unsupported %s", type(value).__name__)
        raise UnsupportedValue(value)


_RENDERERS: dict[ValueCategory, Callable[[Serializer, Any, _Path], str]] = {
    ValueCategory.UNDEFINED: Serializer._render_undefined,
    ValueCategory.NULL: Serializer._render_null,
    ValueCategory.BOOLEAN: Serializer._render_boolean,
    ValueCategory.NUMBER: Serializer._render_number,
    ValueCategory.STRING: Serializer._render_string,
    ValueCategory.SEQUENCE: Serializer._render_sequence,
    ValueCategory.CALLABLE: Serializer._render_callable,
    ValueCategory.SYMBOL: Serializer._render_symbol,
    ValueCategory.RECORD: Serializer._render_record,
    ValueCategory.UNSUPPORTED: Serializer._render_unsupported,
}

_missing: set[ValueCategory] = set(ValueCategory) - set(_RENDERERS)
if _missing:  # pragma: no cover - guards edits to ValueCategory
    raise RuntimeError(f"No renderer for value categories: {sorted(c.value for c in _missing)}")

DEFAULT_SERIALIZER: Serializer = Serializer()


def serialize(value: Any) -> str:
    """Serialize ``value`` with the default (permissive) policy.

    See `Serializer.serialize`.
    """
    return DEFAULT_SERIALIZER.serialize(value)
