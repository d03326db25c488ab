# topmark:header:start
#
#   project      : JsLiteral
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers.

`run_cli` invokes the Click group in-process with `click.testing.CliRunner`.
Tests that depend on configuration discovery use the ``isolation`` fixture so
the working directory is an empty temporary project.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner

from jsliteral.cli.exit_codes import ExitCode
from jsliteral.cli.main import cli
from jsliteral.config import logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from click.testing import Result


@pytest.fixture(autouse=True)
def restore_test_logging() -> Iterator[None]:
    """Reinstall the suite-wide TRACE logging after each CLI invocation.

    The CLI points the root handler at the runner's captured stderr, which is
    closed once the invocation returns.
    """
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI in-process.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["serialize", "-"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.

    Example:
        ```python
        result = run_cli(["serialize", "-"], input_text="[1, 2]")
        assert result.output == "[1, 2]\\n"
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``.

    Args:
        result (Result): The Result object returned by `run_cli`.
        code (ExitCode): The expected exit code.
    """
    assert result.exit_code == code, result.output
