# topmark:header:start
#
#   project      : DisplayKit
#   file         : platform.py
#   file_relpath : src/displaykit/core/platform.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Host platform detection.

Maps Python's ``sys.platform`` onto the small set of platform keys DisplayKit
uses to pick executable paths and keyboard glyphs.
"""

from __future__ import annotations

import sys
from enum import Enum

from displaykit.config.logging import get_logger

logger = get_logger(__name__)


class Platform(str, Enum):
    """Operating-system family as seen by DisplayKit.

    The enum ``.value`` is the stable key used in configuration files
    (``[cli_paths]``) and on the command line (``--platform``).
    """

    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"
    UNKNOWN = "unknown"


_ALIASES: dict[str, Platform] = {
    "win": Platform.WINDOWS,
    "win32": Platform.WINDOWS,
    "cygwin": Platform.WINDOWS,
    "darwin": Platform.MACOS,
    "mac": Platform.MACOS,
    "osx": Platform.MACOS,
}


def platform_from_sys(sys_platform: str) -> Platform:
    """Classify a ``sys.platform`` string.

    Args:
        sys_platform (str): Value in the format of ``sys.platform``.

    Returns:
        Platform: The matching platform, or ``Platform.UNKNOWN``.
    """
    if sys_platform in ("win32", "cygwin"):
        return Platform.WINDOWS
    if sys_platform == "darwin":
        return Platform.MACOS
    if sys_platform.startswith("linux"):
        return Platform.LINUX
    return Platform.UNKNOWN


def current_platform() -> Platform:
    """Return the platform DisplayKit is running on."""
    result = platform_from_sys(sys.platform)
    logger.trace("sys.platform=%r -> %s", sys.platform, result.value)
    return result


def parse_platform(name: str | None) -> Platform | None:
    """Parse a platform key or alias (case-insensitive).

    Returns:
        Platform | None: The platform, or ``None`` if ``name`` is unset or unknown.
    """
    if name is None:
        return None
    key = name.strip().lower()
    try:
        return Platform(key)
    except ValueError:
        return _ALIASES.get(key)
