# topmark:header:start
#
#   project      : JsLiteral
#   file         : console.py
#   file_relpath : src/jsliteral/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Program output for the CLI.

The expression or statement a command produces is the only thing written to
stdout, so it can be redirected into a ``.js`` file. Error diagnostics go to
stderr. Internal logging is configured separately (`jsliteral.config.logging`).
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """What commands need from a console."""

    def print(self, text: str = "", *, nl: bool = True) -> None: ...

    def error(self, text: str, *, nl: bool = True) -> None: ...

    def styled(self, text: str, **style_kwargs: Any) -> str: ...


class ClickConsole:
    """`ConsoleLike` implementation writing through `click.echo`.

    Args:
        enable_color (bool | None): ``--color`` / ``--no-color``. None keeps ANSI
            styling on terminals only, which is Click's own rule.
        out (TextIO | None): Stream for results. Defaults to ``sys.stdout`` at
            construction time, so `click.testing.CliRunner` captures it.
        err (TextIO | None): Stream for diagnostics. Defaults to ``sys.stderr``.
    """

    def __init__(
        self,
        *,
        enable_color: bool | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool | None = enable_color
        self._streams: dict[str, TextIO] = {
            "out": out or sys.stdout,
            "err": err or sys.stderr,
        }

    def _echo(self, stream: str, text: str, nl: bool) -> None:
        click.echo(text, nl=nl, file=self._streams[stream], color=self.enable_color)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a result line to stdout."""
        self._echo("out", text, nl)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write a diagnostic to stderr, highlighted unless color is off."""
        self._echo("err", self.styled(text, fg="bright_red"), nl)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` wrapped in ``click.style`` codes, or as-is with ``--no-color``.

        Codes added here are stripped again by `click.echo` when the target is
        not a terminal and color was not forced.
        """
        if self.enable_color is False:
            return text
        return click.style(text, **style_kwargs)
