# topmark:header:start
#
#   project      : DisplayKit
#   file         : classnames.py
#   file_relpath : src/displaykit/text/classnames.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CSS class-name composition."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _collect(value: Any, out: list[str]) -> None:
    if not value:
        return
    if isinstance(value, str):
        out.extend(value.split())
    elif isinstance(value, Mapping):
        for key, enabled in value.items():
            if enabled:
                out.extend(str(key).split())
    elif isinstance(value, (list, tuple)):
        for item in value:
            _collect(item, out)
    else:
        out.append(str(value))


def class_names(*inputs: Any) -> str:
    """Join CSS class tokens, clsx-style.

    Strings are split on whitespace, lists/tuples are flattened, and mapping
    keys are included when their value is truthy. Falsy inputs are skipped.
    Repeated tokens keep only their last occurrence, so later classes win.

    Example:
        ```python
        class_names("btn", {"active": True, "hidden": False}, ["px-2", None])
        # 'btn active px-2'
        ```
    """
    tokens: list[str] = []
    for value in inputs:
        _collect(value, tokens)
    last_index: dict[str, int] = {tok: i for i, tok in enumerate(tokens)}
    return " ".join(tok for i, tok in enumerate(tokens) if last_index[tok] == i)
