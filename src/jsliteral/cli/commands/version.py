# topmark:header:start
#
#   project      : JsLiteral
#   file         : version.py
#   file_relpath : src/jsliteral/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsLiteral `version` command."""

from __future__ import annotations

import json

import click

from jsliteral.cli.cmd_common import get_console
from jsliteral.constants import JSLITERAL_VERSION


@click.command(
    name="version",
    help="Show the installed version of JsLiteral.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the version as a JSON object.",
)
@click.pass_context
def version_command(ctx: click.Context, *, as_json: bool) -> None:
    """Print the JsLiteral version."""
    console = get_console(ctx)
    if as_json:
        console.print(json.dumps({"version": JSLITERAL_VERSION}))
    else:
        console.print(console.styled(JSLITERAL_VERSION, bold=True))
