"""Terminal paint primitive built on `click.style`."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from .config import RenderConfig
from .models import StyleKind

Paint = Callable[[str, StyleKind], str]


def style_attributes(config: RenderConfig) -> dict[StyleKind, dict[str, Any]]:
    """Map each paintable style to the `click.style` keyword arguments it uses.

    `NORMAL` has no entry; text in that style passes through untouched.

    Args:
        config: Configuration providing the colour palette.

    Returns:
        dict[StyleKind, dict[str, Any]]: Keyword arguments per style kind.

    Examples:
        style_attributes(RenderConfig())[StyleKind.BOLD]  # {"bold": True}
    """
    return {
        StyleKind.NUMBER: {"fg": config.number_color},
        StyleKind.SINGLE_QUOTE_STRING: {"fg": config.single_quote_color},
        StyleKind.DOUBLE_QUOTE_STRING: {"fg": config.double_quote_color},
        StyleKind.HIGHLIGHT: {"bg": config.highlight_color},
        StyleKind.STRIKETHROUGH: {"strikethrough": True},
        StyleKind.ITALIC: {"italic": True},
        StyleKind.BOLD: {"bold": True},
    }


def build_painter(config: RenderConfig | None = None) -> Paint:
    """Create a paint function for the given palette.

    Args:
        config: Configuration providing the colour palette. Defaults to a new
            `RenderConfig` when omitted.

    Returns:
        Paint: Function taking ``(text, kind)`` and returning the styled text.

    Examples:
        paint = build_painter(RenderConfig(number_color="magenta"))
        paint("4", StyleKind.NUMBER)  # "\\x1b[35m4\\x1b[0m"
    """
    attributes = style_attributes(config or RenderConfig())

    def paint(text: str, kind: StyleKind) -> str:
        style = attributes.get(kind)
        if style is None:
            return text
        return click.style(text, **style)

    return paint


paint = build_painter()
