# topmark:header:start
#
#   project      : JsLiteral
#   file         : config.py
#   file_relpath : src/jsliteral/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsLiteral `config` command.

Prints the effective configuration as a ``jsliteral.toml`` document.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsliteral.cli.cmd_common import get_config, get_console, resolve_command_config
from jsliteral.cli.options import serializer_override_options
from jsliteral.config.loaders import to_toml

if TYPE_CHECKING:
    from jsliteral.config.model import JsliteralConfig
    from jsliteral.core.policy import NamedFunctionPolicy


@click.command(
    name="config",
    help="Show the effective configuration as TOML.",
)
@serializer_override_options
@click.pass_context
def config_command(
    ctx: click.Context,
    *,
    named_function_policy: NamedFunctionPolicy | None,
    no_cycle_check: bool,
) -> None:
    """Print the effective configuration."""
    config: JsliteralConfig = resolve_command_config(
        ctx,
        named_function_policy=named_function_policy,
        no_cycle_check=no_cycle_check,
    )
    loaded: JsliteralConfig = get_config(ctx)
    source: str = str(loaded.source) if loaded.source is not None else "built-in defaults"

    console = get_console(ctx)
    console.print(f"# Effective configuration (source: {source})")
    console.print(to_toml(config.to_toml_dict()), nl=False)
