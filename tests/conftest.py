# topmark:header:start
#
#   project      : JsLiteral
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Suite-wide pytest setup for JsLiteral.

Logs at TRACE for the whole run, keeps an exported ``JSLITERAL_LOG_LEVEL``
out of the tests, and exposes type-preserving wrappers for the marks the
suite uses (``mark_cli``, ``parametrize``).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from jsliteral.config import logging

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])


def _keep_signature(mark: pytest.MarkDecorator) -> Callable[[F], F]:
    # Bare pytest marks erase the decorated function's type for pyright.
    return lambda func: cast("F", mark(func))


mark_cli: Callable[[F], F] = _keep_signature(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """`pytest.mark.parametrize` that keeps the test function's type."""
    return _keep_signature(pytest.mark.parametrize(*args, **kwargs))


@pytest.fixture(autouse=True)
def no_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop ``JSLITERAL_LOG_LEVEL``: it would override ``-v`` / ``-q`` in CLI tests."""
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log every serializer dispatch decision while the suite runs."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty project directory.

    Configuration discovery starts at the working directory; running from
    ``tmp_path`` keeps the repository's own ``pyproject.toml`` out of the way.

    Returns:
        Path: The new working directory.
    """
    project: Path = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project
