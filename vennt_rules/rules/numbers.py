"""Lenient number parsing for free-text ability fields."""

import re

LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)")


def parse_int(text: str | None) -> int | None:
    """
    Parse the leading integer of a string.

    "10" -> 10, "5sp" -> 5, " 7 XP" -> 7, "3.9" -> 3.
    Returns None when the text doesn't start with a number.
    """
    if text is None:
        return None
    match = LEADING_INT_PATTERN.match(str(text))
    if match is None:
        return None
    return int(match.group(1))


def format_number(value: int | float) -> str:
    """Render a stat value the way it is displayed: 12.0 -> "12", 2.5 -> "2.5"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
