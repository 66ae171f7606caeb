# topmark:header:start
#
#   project      : DisplayKit
#   file         : keys.py
#   file_relpath : src/displaykit/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML section names and keys for DisplayKit configuration.

Keys defined here are the external configuration API as it appears in
``displaykit.toml`` and in ``[tool.displaykit]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by DisplayKit configuration.

    The ordering mirrors ``displaykit-default.toml``.
    """

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # [cli_paths]
    SECTION_CLI_PATHS: Final[str] = "cli_paths"

    KEY_WINDOWS: Final[str] = "windows"
    KEY_MACOS: Final[str] = "macos"
    KEY_LINUX: Final[str] = "linux"
    KEY_DEFAULT: Final[str] = "default"

    # [output]
    SECTION_OUTPUT: Final[str] = "output"

    KEY_COLOR: Final[str] = "color"
