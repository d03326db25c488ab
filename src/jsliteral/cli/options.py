# topmark:header:start
#
#   project      : JsLiteral
#   file         : options.py
#   file_relpath : src/jsliteral/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click options and parameter types.

Groups and commands stay thin: verbosity, color and serializer-override
options are declared once here and applied as decorators.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Generic, ParamSpec, TypeVar, cast

import click

from jsliteral.cli.errors import JsliteralUsageError
from jsliteral.config.logging import TRACE_LEVEL
from jsliteral.core.policy import NamedFunctionPolicy

P = ParamSpec("P")
R = TypeVar("R")
E = TypeVar("E", bound=Enum)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Return the logging level selected by ``-v`` / ``-q`` counts.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: TRACE for ``-vvv``, DEBUG for ``-vv``, INFO for ``-v``, ERROR for
            ``-q``, CRITICAL for ``-qq``, WARNING otherwise.

    Raises:
        JsliteralUsageError: If both flags are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise JsliteralUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO

    if quiet_count >= 2:
        return logging.CRITICAL
    if quiet_count == 1:
        return logging.ERROR

    return logging.WARNING


class EnumChoiceParam(click.Choice, Generic[E]):
    """A case-insensitive `click.Choice` over an Enum's values that yields members.

    Help text, error messages and shell completion come from `click.Choice`;
    only the final lookup of the member is added here.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        super().__init__([cast("str", member.value) for member in enum_cls], case_sensitive=False)
        self.enum_cls: type[E] = enum_cls

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E:
        """Return the member whose value matches ``value``."""
        if isinstance(value, self.enum_cls):
            return value
        return self.enum_cls(super().convert(value, param, ctx))


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (counted, mutually exclusive)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (-v info, -vv debug, -vvv trace).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Decrease log verbosity (-q errors only, -qq critical only).",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color/--no-color``; unset means color on a TTY only."""
    return click.option(
        "--color/--no-color",
        "color",
        default=None,
        help="Force or disable colored diagnostics (default: auto-detect).",
    )(f)


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config PATH`` and ``--no-config``."""
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=str),
        default=None,
        help="Read configuration from this TOML file instead of discovering one.",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        default=False,
        help="Ignore configuration files and use the built-in defaults.",
    )(f)
    return f


def serializer_override_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add options overriding the configured serializer settings."""
    f = click.option(
        "--named-functions",
        "named_function_policy",
        type=EnumChoiceParam(NamedFunctionPolicy),
        default=None,
        help=(
            "Accept or reject functions with a declared name "
            f"({', '.join(p.value for p in NamedFunctionPolicy)})."
        ),
    )(f)
    f = click.option(
        "--no-cycle-check",
        "no_cycle_check",
        is_flag=True,
        default=False,
        help="Disable cycle detection (cyclic input then exhausts the recursion limit).",
    )(f)
    return f
