"""Parsing and formatting of human size expressions (256M, 1.5G, 10)."""

import math
import re

from common.constants import MAX_SAFE_INTEGER
from common.exceptions import ConfigError

UNIT_MULTIPLIERS = {
    "": 1,
    "K": 1024,
    "M": 1024 ** 2,
    "G": 1024 ** 3,
    "T": 1024 ** 4,
    "P": 1024 ** 5,
}

DISPLAY_UNITS = ["B", "KB", "MB", "GB", "TB", "PB"]

SIZE_PATTERN = re.compile(r"^(\d*\.?\d+)([KMGTP]?)B?$", re.IGNORECASE)


def parse_file_size(size_string: str) -> int:
    """
    Parse a size expression into a byte count.

    The mantissa may be decimal, the optional unit letter is a binary
    multiplier and a trailing B is allowed (e.g. "256M", "1.5GB", "10").

    Args:
        size_string: Size expression as typed by the user

    Returns:
        Size in bytes, rounded down

    Raises:
        ConfigError: If the string is malformed or exceeds the safe range
    """
    match = SIZE_PATTERN.match(size_string)
    if not match:
        raise ConfigError(f"Cannot understand file size string: {size_string}")

    mantissa = float(match.group(1))
    value = mantissa * UNIT_MULTIPLIERS[match.group(2).upper()]
    if value > MAX_SAFE_INTEGER:
        raise ConfigError(f"{size_string} is too large, please do not exceed 7.99PB")

    return math.floor(value)


def keep_three_significant_figures(number: float) -> str:
    """Round to three significant figures, half away from zero."""
    if number == 0:
        return "0.00"

    magnitude = math.floor(math.log10(abs(number)))
    factor = 10 ** (2 - magnitude)
    rounded = math.floor(number * factor + 0.5) / factor
    return f"{rounded:g}"


def format_file_size(size_bytes: int) -> str:
    """
    Format a byte count with the largest binary unit that keeps the value >= 1.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted string (e.g. "256MB", "1.5GB", "10B")
    """
    value = float(size_bytes)
    unit_index = 0
    while value >= 1024 and unit_index < len(DISPLAY_UNITS) - 1:
        value /= 1024
        unit_index += 1

    return keep_three_significant_figures(value) + DISPLAY_UNITS[unit_index]
