# topmark:header:start
#
#   project      : DisplayKit
#   file         : mapping.py
#   file_relpath : src/displaykit/utils/mapping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Flatten and unflatten nested mappings using dotted-path keys.

Settings forms and key/value stores often want ``{"ui.theme.dark": True}``
rather than nested objects; these helpers convert between the two shapes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from displaykit.config.logging import get_logger

logger = get_logger(__name__)

SEPARATOR: str = "."


def flatten_object(obj: Mapping[Any, Any], prefix: str = "") -> dict[str, Any]:
    """Flatten nested mappings into a single dict with dotted keys.

    Nested mappings are descended into; every other value (including lists
    and ``None``) is a leaf. A nested empty mapping contributes no keys.
    Non-string keys are converted with ``str()``.

    Args:
        obj (Mapping[Any, Any]): The mapping to flatten.
        prefix (str): Key prefix for every produced key (no trailing dot).

    Returns:
        dict[str, Any]: The flattened mapping.

    Raises:
        TypeError: If ``obj`` is not a mapping.

    Example:
        ```python
        flatten_object({"a": {"b": 1, "c": [2]}, "d": None})
        # {"a.b": 1, "a.c": [2], "d": None}
        ```
    """
    if not isinstance(obj, Mapping):
        raise TypeError(f"flatten_object() expects a mapping, got {type(obj).__name__}")

    result: dict[str, Any] = {}
    pre: str = prefix + SEPARATOR if prefix else ""
    for k, value in obj.items():
        key: str = pre + str(k)
        if isinstance(value, Mapping):
            result.update(flatten_object(value, key))
        else:
            result[key] = value
    return result


def unflatten_object(flat: Mapping[str, Any]) -> dict[str, Any]:
    """Rebuild nested dicts from dotted keys.

    Keys are processed in order. When a path runs through a slot that holds a
    non-dict value, that value is replaced by a new dict.

    Args:
        flat (Mapping[str, Any]): Mapping with dotted-path keys.

    Returns:
        dict[str, Any]: The nested structure.
    """
    result: dict[str, Any] = {}
    for dotted, value in flat.items():
        *parents, leaf = str(dotted).split(SEPARATOR)
        current: dict[str, Any] = result
        for part in parents:
            child: Any = current.get(part)
            if not isinstance(child, dict):
                if child is not None:
                    logger.debug(
                        "Replacing non-mapping value at %r while unflattening %r", part, dotted
                    )
                child = {}
                current[part] = child
            current = child
        current[leaf] = value
    return result
