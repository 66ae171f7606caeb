# topmark:header:start
#
#   project      : DisplayKit
#   file         : test_color_resolution.py
#   file_relpath : tests/cli/test_color_resolution.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for color-mode resolution (override, environment, TTY)."""

from __future__ import annotations

import pytest

from displaykit.cli_shared.color import ColorMode, resolve_color_mode
from tests.conftest import parametrize


@parametrize(
    "mode, expected",
    [(ColorMode.ALWAYS, True), (ColorMode.NEVER, False)],
)
def test_explicit_mode_beats_environment(
    monkeypatch: pytest.MonkeyPatch, mode: ColorMode, expected: bool
) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    monkeypatch.setenv("NO_COLOR", "1")

    assert resolve_color_mode(color_mode_override=mode, stdout_isatty=not expected) is expected


def test_force_color_beats_no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    monkeypatch.setenv("NO_COLOR", "1")

    assert resolve_color_mode(color_mode_override=ColorMode.AUTO, stdout_isatty=False) is True


def test_force_color_zero_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "0")

    assert resolve_color_mode(color_mode_override=None, stdout_isatty=False) is False


def test_no_color_disables_on_tty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "")

    assert resolve_color_mode(color_mode_override=None, stdout_isatty=True) is False


@parametrize("isatty", [True, False])
def test_auto_follows_tty(isatty: bool) -> None:
    assert resolve_color_mode(color_mode_override=ColorMode.AUTO, stdout_isatty=isatty) is isatty
