# topmark:header:start
#
#   project      : DisplayKit
#   file         : file.py
#   file_relpath : src/displaykit/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File helpers."""

from __future__ import annotations

import asyncio
import os
from typing import TYPE_CHECKING

from displaykit.config.logging import get_logger

if TYPE_CHECKING:
    from os import PathLike

logger = get_logger(__name__)

_UNITS: tuple[str, ...] = ("B", "KiB", "MiB", "GiB", "TiB", "PiB")


async def get_file_size(path: str | PathLike[str]) -> int:
    """Return the size of ``path`` in bytes.

    The ``stat`` call runs in a worker thread so the event loop is not blocked.
    Errors such as ``FileNotFoundError`` propagate unchanged.
    """
    st: os.stat_result = await asyncio.to_thread(os.stat, path)
    logger.debug("stat %s: %d bytes", path, st.st_size)
    return st.st_size


def format_file_size(size: int) -> str:
    """Format a byte count with binary units (``"1.5 KiB"``).

    Raises:
        ValueError: If ``size`` is negative.
    """
    if size < 0:
        raise ValueError(f"File size cannot be negative: {size}")
    if size < 1024:
        return f"{size} B"
    value = float(size)
    unit: str = _UNITS[0]
    for unit in _UNITS[1:]:
        value /= 1024
        if value < 1024:
            break
    return f"{value:.1f} {unit}"
