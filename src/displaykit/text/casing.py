# topmark:header:start
#
#   project      : DisplayKit
#   file         : casing.py
#   file_relpath : src/displaykit/text/casing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Identifier casing helpers.

Converts snake_case and kebab-case identifiers (as found in JSON produced by
Rust/Python backends) to the camelCase keys expected by display code.
"""

from __future__ import annotations

import re
from typing import Any, Final

from displaykit.config.logging import get_logger

logger = get_logger(__name__)

# A separator directly followed by a lowercase ASCII letter.
_RE_SEPARATED_LOWER: Final[re.Pattern[str]] = re.compile(r"[-_][a-z]")


def to_camel_case(text: str) -> str:
    """Convert ``snake_case`` / ``kebab-case`` to ``camelCase``.

    Each ``-`` or ``_`` that is directly followed by a lowercase ASCII letter is
    dropped and the letter is upper-cased. Everything else is left alone, so
    ``"foo_Bar"`` and ``"foo_1"`` are unchanged and ``"foo__bar"`` becomes
    ``"foo_Bar"``.

    Args:
        text (str): The identifier to convert.

    Returns:
        str: The converted identifier.
    """
    return _RE_SEPARATED_LOWER.sub(lambda m: m.group(0)[1].upper(), text)


def keys_to_camel_case(obj: Any) -> Any:
    """Recursively camel-case the keys of plain dicts.

    Lists and tuples are traversed element-wise (and returned as lists). Only
    ``dict`` instances have their keys converted; other values, including other
    mapping types, are returned unchanged. When two keys collide after
    conversion, the later one wins.

    Args:
        obj (Any): A JSON-like value.

    Returns:
        Any: A converted copy; scalars are returned as-is.
    """
    if isinstance(obj, (list, tuple)):
        return [keys_to_camel_case(v) for v in obj]
    if type(obj) is dict:
        result: dict[Any, Any] = {}
        for key, value in obj.items():
            new_key = to_camel_case(key) if isinstance(key, str) else key
            if new_key in result:
                logger.debug("Key %r collides after camel-casing; later value wins", new_key)
            result[new_key] = keys_to_camel_case(value)
        return result
    return obj
