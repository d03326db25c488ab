# topmark:header:start
#
#   project      : JsLiteral
#   file         : failures.py
#   file_relpath : src/jsliteral/diagnostic/failures.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Turn captured serialization failures into diagnostics.

Failures are told apart by the shape of the captured error (see
`jsliteral.core.errors.classify_failure`): unregistered symbols, functions,
cycles, and everything else, which is reported by its runtime type name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from jsliteral.core.errors import FailureKind, SerializationError, classify_failure
from jsliteral.core.policy import NamedFunctionPolicy
from jsliteral.diagnostic.model import Diagnostic, DiagnosticLevel

if TYPE_CHECKING:
    from jsliteral.core.values import JsFunction

SYMBOL_HINT: str = (
    "A symbol must be registered to be serialized.\n"
    'Consider using `Symbol.for("description")` (JsSymbol.for_key) instead.'
)


def describe_failure(
    error: Exception,
    *,
    subject: str = "Value",
    named_function_policy: NamedFunctionPolicy = NamedFunctionPolicy.ACCEPT,
) -> Diagnostic:
    """Return an error diagnostic explaining why ``subject`` could not be serialized.

    Args:
        error (Exception): The error captured by `safe_apply`.
        subject (str): What was being serialized, e.g. ``"Key"``.
        named_function_policy (NamedFunctionPolicy): The policy in effect, used
            to phrase advice about named functions.

    Returns:
        Diagnostic: An ERROR-level diagnostic with a hint where one applies.
    """
    kind: FailureKind = classify_failure(error)
    offending: object = error.value if isinstance(error, SerializationError) else None

    if kind is FailureKind.SYMBOL:
        return Diagnostic(
            DiagnosticLevel.ERROR,
            f"{subject} contains a non-registered symbol {offending!r}.",
            SYMBOL_HINT,
        )

    if kind is FailureKind.CALLABLE:
        function: JsFunction = cast("JsFunction", offending)
        if function.is_native:
            return Diagnostic(
                DiagnosticLevel.ERROR,
                f"{subject} contains a native function without a name.",
                "Native functions are referenced by their global name; "
                'use JsFunction.native("Name").',
            )
        if function.is_class:
            label: str = f"the class {function.name!r}" if function.name else "an anonymous class"
            return Diagnostic(
                DiagnosticLevel.ERROR,
                f"{subject} contains {label}.",
                "Classes cannot be serialized; pass plain data or functions instead.",
            )
        hint: str = (
            "Named functions are rejected by the 'reject' policy. Rewrite it as an "
            "anonymous function or arrow function, or set named_function_policy = \"accept\"."
            if named_function_policy is NamedFunctionPolicy.REJECT
            else str(error)
        )
        return Diagnostic(
            DiagnosticLevel.ERROR,
            f"{subject} contains the named function {function.name!r}.",
            hint,
        )

    if kind is FailureKind.CYCLE:
        return Diagnostic(
            DiagnosticLevel.ERROR,
            f"{subject} contains a cyclic reference through a {type(offending).__name__}.",
            "Cyclic structures have no expression form; break the cycle first.",
        )

    if isinstance(error, SerializationError):
        return Diagnostic(
            DiagnosticLevel.ERROR,
            f"{subject} contains an invalid type: {type(offending).__name__}.",
            str(error),
        )
    return Diagnostic(
        DiagnosticLevel.ERROR,
        f"{subject} could not be serialized: {type(error).__name__}: {error}",
    )
