# topmark:header:start
#
#   project      : JsLiteral
#   file         : assign.py
#   file_relpath : src/jsliteral/cli/commands/assign.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsLiteral `assign` command.

Prints a guarded global definition for a JSON or TOML document::

    globalThis["KEY"] ??= <expression>;

The key and the value are serialized separately, so a failure message says
which of the two could not be serialized.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from jsliteral.cli.cmd_common import diagnostic_error, get_console, resolve_command_config
from jsliteral.cli.errors import JsliteralUnexpectedError
from jsliteral.cli.io import STDIN_MARKER, InputFormat, load_input
from jsliteral.cli.options import EnumChoiceParam, serializer_override_options
from jsliteral.config.logging import get_logger
from jsliteral.core.assignment import serialize_global
from jsliteral.core.result import Ok
from jsliteral.core.values import JsSymbol

if TYPE_CHECKING:
    from jsliteral.config.model import JsliteralConfig
    from jsliteral.core.assignment import GlobalAssignment
    from jsliteral.core.policy import NamedFunctionPolicy

logger = get_logger(__name__)


@click.command(
    name="assign",
    help="Print `globalThis[KEY] ??= <value>;` for a JSON or TOML document (INPUT or '-').",
)
@click.argument("key", type=str)
@click.argument("source", metavar="INPUT", default=STDIN_MARKER, type=str)
@click.option(
    "--symbol",
    "as_symbol",
    is_flag=True,
    default=False,
    help='Use Symbol.for("KEY") as the global key instead of the string KEY.',
)
@click.option(
    "--format",
    "input_format",
    type=EnumChoiceParam(InputFormat),
    default=None,
    help="Input format (default: toml for *.toml files, json otherwise).",
)
@serializer_override_options
@click.pass_context
def assign_command(
    ctx: click.Context,
    *,
    key: str,
    source: str,
    as_symbol: bool,
    input_format: InputFormat | None,
    named_function_policy: NamedFunctionPolicy | None,
    no_cycle_check: bool,
) -> None:
    """Print a guarded global assignment statement."""
    config: JsliteralConfig = resolve_command_config(
        ctx,
        named_function_policy=named_function_policy,
        no_cycle_check=no_cycle_check,
    )
    value: Any = load_input(source, input_format)
    global_key: str | JsSymbol = JsSymbol.for_key(key) if as_symbol else key

    outcome: GlobalAssignment = serialize_global(global_key, value, config.build_serializer())
    statement: str | None = outcome.statement
    if statement is not None:
        get_console(ctx).print(statement)
        return

    error: Exception | None = outcome.error
    if error is None:
        # Only an assignment built without a value result gets here.
        raise JsliteralUnexpectedError("Global assignment has neither a statement nor an error.")
    if outcome.failed_side == "key":
        subject: str = f"Key {key!r}"
    else:
        serialized_key: str = outcome.key.ok if isinstance(outcome.key, Ok) else repr(key)
        subject = f"Value of globalThis[{serialized_key}]"
    logger.info("assign: %s failed", outcome.failed_side)
    raise diagnostic_error(ctx, error, subject=subject, config=config)
