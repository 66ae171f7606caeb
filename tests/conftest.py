# topmark:header:start
#
#   project      : DisplayKit
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the DisplayKit test suite.

Sets up typed wrappers around common pytest decorators, routes DisplayKit's
logging at TRACE level during the run, and isolates every test from the
developer's own configuration (user config, project config, color env vars).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from displaykit.config import logging

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def isolate_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test from a scratch directory with no inherited configuration.

    - ``DISPLAYKIT_LOG_LEVEL`` is cleared so a developer's shell cannot force
      DEBUG/TRACE output into CLI results.
    - ``XDG_CONFIG_HOME`` points at an empty directory so no user config loads.
    - ``NO_COLOR`` / ``FORCE_COLOR`` are cleared so color resolution is predictable.
    - ``DISPLAYKIT_ENV_DEBUG`` is cleared so analytics start in release mode.
    - The working directory is ``tmp_path``.

    Returns:
        Path: The scratch directory (same as ``tmp_path``).
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("DISPLAYKIT_ENV_DEBUG", raising=False)
    xdg: Path = tmp_path / "xdg"
    xdg.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Enable TRACE logging for the test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
