# topmark:header:start
#
#   project      : JsLiteral
#   file         : cmd_common.py
#   file_relpath : src/jsliteral/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by CLI commands.

Commands read shared state (console, configuration) from ``ctx.obj``, which
the group callback in `jsliteral.cli.main` fills once per invocation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsliteral.cli.errors import JsliteralDataError, JsliteralError, JsliteralUnexpectedError
from jsliteral.config.model import JsliteralConfig
from jsliteral.core.errors import SerializationError
from jsliteral.diagnostic.failures import describe_failure

if TYPE_CHECKING:
    from jsliteral.cli.console import ConsoleLike
    from jsliteral.core.policy import NamedFunctionPolicy
    from jsliteral.diagnostic.model import Diagnostic


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_config(ctx: click.Context) -> JsliteralConfig:
    """Return the effective configuration stored on the context (defaults if unset)."""
    ctx.ensure_object(dict)
    config: JsliteralConfig | None = ctx.obj.get("config")
    return config if config is not None else JsliteralConfig()


def resolve_command_config(
    ctx: click.Context,
    *,
    named_function_policy: NamedFunctionPolicy | None,
    no_cycle_check: bool,
) -> JsliteralConfig:
    """Apply command-line serializer overrides on top of the loaded configuration."""
    return get_config(ctx).with_overrides(
        named_function_policy=named_function_policy,
        detect_cycles=False if no_cycle_check else None,
    )


def diagnostic_error(
    ctx: click.Context,
    error: Exception,
    *,
    subject: str,
    config: JsliteralConfig,
) -> JsliteralError:
    """Return a CLI error whose message is the diagnostic for ``error``.

    Serializer failures are data errors; anything else the serializer raised
    (e.g. ``RecursionError`` without cycle detection) is unexpected. The caller
    raises the result: ``raise diagnostic_error(...)``.
    """
    diagnostic: Diagnostic = describe_failure(
        error,
        subject=subject,
        named_function_policy=config.named_function_policy,
    )
    color: bool = ctx.obj.get("color") is not False if isinstance(ctx.obj, dict) else False
    if isinstance(error, SerializationError):
        return JsliteralDataError(diagnostic.render(color=color))
    return JsliteralUnexpectedError(diagnostic.render(color=color))
