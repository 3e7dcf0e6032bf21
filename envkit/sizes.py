# envkit/sizes.py
"""Memory size parsing for values such as ``10MB``, ``512KB`` or ``1GB``."""
from __future__ import annotations

from typing import Final

from envkit.errors import EnvParseError

_SIZE_UNITS: Final[tuple[tuple[str, int], ...]] = (
    ("KB", 1024),
    ("MB", 1024 * 1024),
    ("GB", 1024 * 1024 * 1024),
)


def parse_memory_size(text: str, key: str = "memory_size") -> int:
    """Parse a memory size into a number of bytes.

    Units are binary (1KB == 1024 bytes) and case-insensitive. A bare
    number is taken as bytes.

    Args:
        text: Size text, e.g. ``"512kb"`` or ``" 2GB "``.
        key: Name reported in the error when parsing fails.

    Returns:
        Size in bytes.

    Raises:
        EnvParseError: If the number part is not a non-negative integer.
    """
    normalized = str(text).strip().upper()

    number, multiplier = normalized, 1
    for suffix, factor in _SIZE_UNITS:
        if normalized.endswith(suffix):
            number, multiplier = normalized[: -len(suffix)], factor
            break

    # One leading plus sign is allowed, as for unsigned integer parsing
    if number.startswith("+"):
        number = number[1:]

    # isdigit() also accepts non-ASCII digits that int() cannot always read
    if not (number.isascii() and number.isdigit()):
        raise EnvParseError(key, normalized)

    return int(number) * multiplier
