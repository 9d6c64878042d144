"""Delimiter characters and the styles they toggle."""

from __future__ import annotations

from types import MappingProxyType

from .models import StyleKind

DELIMITER_MAP = MappingProxyType(
    {
        "'": StyleKind.SINGLE_QUOTE_STRING,
        '"': StyleKind.DOUBLE_QUOTE_STRING,
        "~": StyleKind.STRIKETHROUGH,
        "`": StyleKind.HIGHLIGHT,
        "*": StyleKind.ITALIC,
        "_": StyleKind.BOLD,
    }
)

DELIMITER_CHARACTERS = frozenset(DELIMITER_MAP)

# Quote kinds render their own delimiter; every other delimiter is emitted bare.
QUOTE_KINDS = frozenset({StyleKind.SINGLE_QUOTE_STRING, StyleKind.DOUBLE_QUOTE_STRING})


def style_for(char: str) -> StyleKind | None:
    """Look up the style toggled by a delimiter character.

    Args:
        char: A single character.

    Returns:
        StyleKind | None: The toggled style, or None when `char` is not a
            delimiter.

    Examples:
        style_for("_")  # StyleKind.BOLD
        style_for("a")  # None
    """
    return DELIMITER_MAP.get(char)


def is_quote_toggler(kind: StyleKind) -> bool:
    """Return True when a delimiter of this kind is painted with its own style."""
    return kind in QUOTE_KINDS
