# topmark:header:start
#
#   project      : DisplayKit
#   file         : test_platform.py
#   file_relpath : tests/core/test_platform.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for host platform detection and parsing."""

from __future__ import annotations

import pytest

from displaykit.core.platform import (
    Platform,
    current_platform,
    parse_platform,
    platform_from_sys,
)
from tests.conftest import parametrize


@parametrize(
    "sys_platform, expected",
    [
        ("win32", Platform.WINDOWS),
        ("cygwin", Platform.WINDOWS),
        ("darwin", Platform.MACOS),
        ("linux", Platform.LINUX),
        ("linux2", Platform.LINUX),
        ("freebsd14", Platform.UNKNOWN),
        ("emscripten", Platform.UNKNOWN),
    ],
)
def test_platform_from_sys(sys_platform: str, expected: Platform) -> None:
    assert platform_from_sys(sys_platform) is expected


def test_current_platform_reads_sys_platform(monkeypatch: pytest.MonkeyPatch) -> None:
    """`current_platform()` classifies the live ``sys.platform`` value."""
    monkeypatch.setattr("sys.platform", "darwin")

    assert current_platform() is Platform.MACOS


@parametrize(
    "name, expected",
    [
        ("windows", Platform.WINDOWS),
        ("MacOS", Platform.MACOS),
        (" linux ", Platform.LINUX),
        ("unknown", Platform.UNKNOWN),
        ("win32", Platform.WINDOWS),
        ("Darwin", Platform.MACOS),
        ("osx", Platform.MACOS),
        ("beos", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_platform(name: str | None, expected: Platform | None) -> None:
    """Keys and aliases parse case-insensitively; misses return None."""
    assert parse_platform(name) is expected
