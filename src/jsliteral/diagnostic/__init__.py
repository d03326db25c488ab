# topmark:header:start
#
#   project      : JsLiteral
#   file         : __init__.py
#   file_relpath : src/jsliteral/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""User-facing diagnostics for serialization failures.

The core raises; callers capture failures with `jsliteral.core.result.safe_apply`
and turn them into a `Diagnostic` with `describe_failure`.
"""

from __future__ import annotations

from jsliteral.diagnostic.failures import describe_failure
from jsliteral.diagnostic.model import Diagnostic, DiagnosticLevel

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "describe_failure",
]
