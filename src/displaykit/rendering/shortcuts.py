# topmark:header:start
#
#   project      : DisplayKit
#   file         : shortcuts.py
#   file_relpath : src/displaykit/rendering/shortcuts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keyboard-shortcut labels for display.

Turns accelerator strings such as ``"Super+Shift+S"`` into the glyph form
users see in menus (``"⌘ + ⇧ + S"`` on macOS).
"""

from __future__ import annotations

from displaykit.core.platform import Platform, current_platform

SUPER_MACOS: str = "⌘"
SUPER_OTHER: str = "⊞"
CTRL: str = "⌃"
ALT_MACOS: str = "⌥"
ALT_OTHER: str = "Alt"
SHIFT: str = "⇧"

SEPARATOR: str = " + "


def _key_label(key: str, platform: Platform) -> str:
    if key == "super":
        return SUPER_MACOS if platform is Platform.MACOS else SUPER_OTHER
    if key == "ctrl":
        return CTRL
    if key == "alt":
        return ALT_MACOS if platform is Platform.MACOS else ALT_OTHER
    if key == "shift":
        return SHIFT
    return key[:1].upper() + key[1:]


def parse_keyboard_shortcut(shortcut: str, platform: Platform | None = None) -> str:
    """Format an accelerator string as a human-readable label.

    The shortcut is lower-cased, split on ``+`` and each key trimmed; repeated
    keys are dropped (first occurrence wins). Modifiers become glyphs and other
    keys are capitalized. Keys are joined with ``" + "``.

    Args:
        shortcut (str): Accelerator such as ``"super+shift+s"``.
        platform (Platform | None): Platform whose glyphs to use; defaults to
            the current platform.

    Returns:
        str: The display label, e.g. ``"⌘ + ⇧ + S"``.
    """
    target: Platform = platform or current_platform()
    keys: dict[str, None] = dict.fromkeys(k.strip() for k in shortcut.lower().split("+"))
    return SEPARATOR.join(_key_label(key, target) for key in keys)
