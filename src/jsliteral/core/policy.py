# topmark:header:start
#
#   project      : JsLiteral
#   file         : policy.py
#   file_relpath : src/jsliteral/core/policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serializer policies."""

from __future__ import annotations

from enum import Enum


class NamedFunctionPolicy(str, Enum):
    """How the serializer treats functions that carry a declared name.

    Attributes:
        ACCEPT: Emit any function whose source text is available. Only native
            functions without a name are rejected.
        REJECT: Additionally reject every named function, so that only
            anonymous closures (arrow functions, anonymous ``function``
            expressions) are emitted.
    """

    ACCEPT = "accept"
    REJECT = "reject"
