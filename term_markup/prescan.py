"""Cheap check for lines that carry inline markup."""

from __future__ import annotations

from .catalog import DELIMITER_CHARACTERS


def has_delimiter_pair(line: str) -> bool:
    """Determine whether a line contains at least one complete delimiter pair.

    A pair is two occurrences of the same delimiter character with at least
    one character of any kind strictly between them. Comparing the first and
    last occurrence is enough: if any two occurrences are separated, those two
    are too.

    Args:
        line: Line to inspect, without its terminator.

    Returns:
        bool: True when the line needs styling, otherwise False.

    Examples:
        has_delimiter_pair("a _bold_ word")  # True
        has_delimiter_pair("__")  # False, nothing between the underscores
        has_delimiter_pair("* bullet")  # False, single asterisk
    """
    if len(line) < 3:
        return False

    for char in DELIMITER_CHARACTERS:
        first = line.find(char)
        if first == -1:
            continue
        last = line.rfind(char)
        if last - first >= 2:
            return True

    return False
