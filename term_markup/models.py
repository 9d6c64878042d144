"""Data models for term-markup."""

from dataclasses import dataclass
from enum import Enum, auto


class StyleKind(Enum):
    """Styles that can be active while scanning a line.

    Exactly one kind is active at any point; `NORMAL` means no style.

    Attributes:
        NORMAL: No style active; characters pass through.
        NUMBER: Numeric literal, entered by any decimal digit.
        SINGLE_QUOTE_STRING: Text between single quotes, quotes included.
        DOUBLE_QUOTE_STRING: Text between double quotes, quotes included.
        STRIKETHROUGH: Text between tildes.
        HIGHLIGHT: Text between backticks, painted with a background colour.
        ITALIC: Text between asterisks.
        BOLD: Text between underscores.
    """

    NORMAL = auto()
    NUMBER = auto()
    SINGLE_QUOTE_STRING = auto()
    DOUBLE_QUOTE_STRING = auto()
    STRIKETHROUGH = auto()
    HIGHLIGHT = auto()
    ITALIC = auto()
    BOLD = auto()


@dataclass
class ScanState:
    """Mutable state for scanning a single line.

    A fresh instance is created for every line, so no style carries over.

    Attributes:
        active_style: Style currently in effect.
    """

    active_style: StyleKind = StyleKind.NORMAL
