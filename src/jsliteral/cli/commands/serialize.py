# topmark:header:start
#
#   project      : JsLiteral
#   file         : serialize.py
#   file_relpath : src/jsliteral/cli/commands/serialize.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsLiteral `serialize` command.

Reads a JSON or TOML document and prints the JavaScript expression that
evaluates to it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from jsliteral.cli.cmd_common import diagnostic_error, get_console, resolve_command_config
from jsliteral.cli.io import STDIN_MARKER, InputFormat, load_input
from jsliteral.cli.options import EnumChoiceParam, serializer_override_options
from jsliteral.core.result import Err, safe_apply

if TYPE_CHECKING:
    from jsliteral.config.model import JsliteralConfig
    from jsliteral.core.policy import NamedFunctionPolicy
    from jsliteral.core.result import Result


@click.command(
    name="serialize",
    help="Print the JavaScript expression for a JSON or TOML document (INPUT or '-' for STDIN).",
)
@click.argument("source", metavar="INPUT", default=STDIN_MARKER, type=str)
@click.option(
    "--format",
    "input_format",
    type=EnumChoiceParam(InputFormat),
    default=None,
    help="Input format (default: toml for *.toml files, json otherwise).",
)
@serializer_override_options
@click.pass_context
def serialize_command(
    ctx: click.Context,
    *,
    source: str,
    input_format: InputFormat | None,
    named_function_policy: NamedFunctionPolicy | None,
    no_cycle_check: bool,
) -> None:
    """Serialize a document to a JavaScript expression."""
    config: JsliteralConfig = resolve_command_config(
        ctx,
        named_function_policy=named_function_policy,
        no_cycle_check=no_cycle_check,
    )
    value: Any = load_input(source, input_format)

    result: Result[str] = safe_apply(config.build_serializer().serialize, value)
    if isinstance(result, Err):
        raise diagnostic_error(ctx, result.error, subject="Input", config=config)

    get_console(ctx).print(result.ok)
