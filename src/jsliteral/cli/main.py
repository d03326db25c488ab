# topmark:header:start
#
#   project      : JsLiteral
#   file         : main.py
#   file_relpath : src/jsliteral/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsLiteral CLI entry point.

Group-level options (verbosity, color, configuration) are resolved once in the
group callback and stored on ``ctx.obj`` for the subcommands:

    * ``console``: the `ClickConsole` for program output;
    * ``color``: the requested color mode (True, False or None for auto);
    * ``log_level``: the effective logging level;
    * ``config``: the loaded `JsliteralConfig`.
"""

from __future__ import annotations

from pathlib import Path

import click

from jsliteral.cli.commands.assign import assign_command
from jsliteral.cli.commands.config import config_command
from jsliteral.cli.commands.serialize import serialize_command
from jsliteral.cli.commands.version import version_command
from jsliteral.cli.console import ClickConsole
from jsliteral.cli.errors import JsliteralConfigError, JsliteralUsageError
from jsliteral.cli.options import (
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_verbosity,
)
from jsliteral.config.loaders import ConfigError
from jsliteral.config.logging import get_logger, resolve_env_log_level, setup_logging
from jsliteral.config.model import JsliteralConfig

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color: bool | None,
) -> None:
    """Initialize logging, color and the console on the Click context.

    ``JSLITERAL_LOG_LEVEL`` takes precedence over ``-v`` / ``-q``.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color (bool | None): ``--color`` / ``--no-color``, or None for auto.
    """
    ctx.ensure_object(dict)

    level: int = resolve_verbosity(verbose, quiet)
    env_level: int | None = resolve_env_log_level()
    if env_level is not None:
        level = env_level
    setup_logging(level=level)
    ctx.obj["log_level"] = level

    ctx.obj["color"] = color
    ctx.color = color
    ctx.obj["console"] = ClickConsole(enable_color=color)


def load_config(*, config_path: str | None, no_config: bool) -> JsliteralConfig:
    """Load the configuration selected by ``--config`` / ``--no-config``.

    Raises:
        JsliteralUsageError: If both options are given.
        JsliteralConfigError: If the configuration cannot be loaded.
    """
    if config_path is not None and no_config:
        raise JsliteralUsageError(
            "The '--config' and '--no-config' options are mutually exclusive."
        )
    if no_config:
        return JsliteralConfig()
    try:
        if config_path is not None:
            return JsliteralConfig.load(Path(config_path))
        return JsliteralConfig.discover(Path.cwd())
    except ConfigError as exc:
        raise JsliteralConfigError(str(exc)) from exc


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Render JSON and TOML documents as JavaScript expressions.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color: bool | None,
    config_path: str | None,
    no_config: bool,
) -> None:
    """Entry point for the JsLiteral CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, color=color)
    ctx.obj["config"] = load_config(config_path=config_path, no_config=no_config)

    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print("Hint: use 'jsliteral serialize INPUT' to print a JavaScript expression.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(serialize_command)

cli.add_command(assign_command)

cli.add_command(config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
