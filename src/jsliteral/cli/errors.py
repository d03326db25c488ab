# topmark:header:start
#
#   project      : JsLiteral
#   file         : errors.py
#   file_relpath : src/jsliteral/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the JsLiteral CLI.

Raise these from commands to exit with a standardized message and exit code.
They print through the project console when one is present in the Click
context, and fall back to Click's own error display otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from jsliteral.cli.exit_codes import ExitCode


class JsliteralError(click.ClickException):
    """Base class for all JsLiteral CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (no color)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error on the project console, or via Click if there is none."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class JsliteralUsageError(JsliteralError):
    """Invalid flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class JsliteralDataError(JsliteralError):
    """Unparseable input, or a value without a JavaScript expression form."""

    exit_code = ExitCode.DATA_ERROR


class JsliteralFileNotFoundError(JsliteralError):
    """Input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class JsliteralIOError(JsliteralError):
    """Error reading the input."""

    exit_code = ExitCode.IO_ERROR


class JsliteralPermissionDeniedError(JsliteralError):
    """Input is not readable."""

    exit_code = ExitCode.PERMISSION_DENIED


class JsliteralConfigError(JsliteralError):
    """Missing, invalid or malformed configuration."""

    exit_code = ExitCode.CONFIG_ERROR


class JsliteralUnexpectedError(JsliteralError):
    """Unhandled error (last resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
