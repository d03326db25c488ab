# topmark:header:start
#
#   project      : JsLiteral
#   file         : model.py
#   file_relpath : src/jsliteral/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic types: a severity level, a message and an optional hint."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable


class DiagnosticLevel(Enum):
    """Severity of a diagnostic."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


# Only the ``level:`` prefix is colored; message and hint stay plain.
_PREFIX_STYLES: Final[dict[DiagnosticLevel, Callable[[str], str]]] = {
    DiagnosticLevel.INFO: chalk.cyan,
    DiagnosticLevel.WARNING: chalk.yellow.bold,
    DiagnosticLevel.ERROR: chalk.red_bright.bold,
}


@dataclass(frozen=True)
class Diagnostic:
    """A user-facing explanation of a failure.

    Attributes:
        level (DiagnosticLevel): Severity.
        message (str): What went wrong, as one sentence naming the subject.
        hint (str | None): How to fix it, if there is advice to give.
    """

    level: DiagnosticLevel
    message: str
    hint: str | None = None

    def render(self, *, color: bool = False) -> str:
        """Return ``"<level>: <message>"``, followed by the hint after a blank line."""
        prefix: str = f"{self.level.value}:"
        if color:
            prefix = _PREFIX_STYLES[self.level](prefix)
        lines: list[str] = [f"{prefix} {self.message}"]
        if self.hint:
            lines.extend(["", self.hint])
        return "\n".join(lines)
