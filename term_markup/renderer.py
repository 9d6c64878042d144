"""Inline markup rendering."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .catalog import is_quote_toggler, style_for
from .config import RenderConfig, validate_config
from .constants import DECIMAL_POINT, LINE_TERMINATOR
from .filesystem import collect_file_stat, enforce_file_size, read_lines
from .models import ScanState, StyleKind
from .painter import Paint, build_painter, paint as default_paint
from .prescan import has_delimiter_pair

logger = logging.getLogger(__name__)


def _toggle(state: ScanState, kind: StyleKind) -> None:
    """Open `kind`, or close it when it is already the active style.

    Opening replaces whatever style was active; there is no nesting.
    """
    if state.active_style is kind:
        state.active_style = StyleKind.NORMAL
    else:
        state.active_style = kind


def render_char(state: ScanState, char: str, paint: Paint = default_paint) -> str:
    """Advance the scan by one character and return its rendered form.

    Rules are checked in order: digits, decimal point, delimiters, then any
    other character, which takes the active style.

    Args:
        state: Scan state for the current line; updated in place.
        char: Next character of the line.
        paint: Function applying a style to text.

    Returns:
        str: The rendered character, possibly wrapped in escape sequences.

    Examples:
        state = ScanState()
        render_char(state, "_")  # "_", state.active_style is StyleKind.BOLD
    """
    if char.isdecimal():
        state.active_style = StyleKind.NUMBER
        return paint(char, StyleKind.NUMBER)

    if char == DECIMAL_POINT:
        if state.active_style is StyleKind.NUMBER:
            return paint(char, StyleKind.NUMBER)
        return char

    kind = style_for(char)
    if kind is not None:
        _toggle(state, kind)
        if is_quote_toggler(kind):
            return paint(char, kind)
        return char

    if state.active_style in (StyleKind.NORMAL, StyleKind.NUMBER):
        return char
    return paint(char, state.active_style)


def style_line(line: str, paint: Paint = default_paint) -> str:
    """Run the style state machine over one line.

    Args:
        line: Line to render, without its terminator.
        paint: Function applying a style to text.

    Returns:
        str: Rendered line without a terminator. Styles left open at the end of
            the line are dropped.

    Examples:
        style_line("a *b* c", lambda text, kind: text.upper())  # "a *B* c"
    """
    state = ScanState()
    return "".join(render_char(state, char, paint) for char in line)


def render_line(line: str, paint: Paint = default_paint) -> str:
    """Render one line and append the line terminator.

    Lines without a complete delimiter pair are returned verbatim.

    Args:
        line: Line to render, without its terminator.
        paint: Function applying a style to text.

    Returns:
        str: Rendered line ending in exactly one newline.

    Examples:
        render_line("plain text")  # "plain text\\n"
    """
    if not has_delimiter_pair(line):
        return line + LINE_TERMINATOR
    return style_line(line, paint) + LINE_TERMINATOR


def render_lines(lines: Iterable[str], paint: Paint = default_paint) -> str:
    """Render every line in order and join the results into one buffer.

    Args:
        lines: Lines without terminators.
        paint: Function applying a style to text.

    Returns:
        str: The complete rendered output.
    """
    rendered = [render_line(line, paint) for line in lines]
    logger.debug("Rendered %d lines", len(rendered))
    return "".join(rendered)


def render_document(content: str, paint: Paint = default_paint) -> str:
    """Render a whole text.

    Line boundaries are ``\\n`` and ``\\r\\n``; a final terminator does not
    start an extra empty line.

    Args:
        content: Text to render.
        paint: Function applying a style to text.

    Returns:
        str: The rendered text, one terminator per line.

    Examples:
        render_document("one\\ntwo\\n")  # "one\\ntwo\\n"
    """
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return render_lines((line.removesuffix("\r") for line in lines), paint)


def render_file(filepath: Path, config: RenderConfig | None = None) -> str:
    """Read and render a file.

    Args:
        filepath: Path to the file to render.
        config: Palette and limits. Defaults to a new `RenderConfig` when
            omitted.

    Returns:
        str: The rendered file contents.

    Raises:
        ConfigError: If the configuration fails validation.
        FileOpenError: If the file cannot be inspected or opened, or exceeds
            `config.max_file_size`.
        LineReadError: If a line cannot be decoded.

    Examples:
        output = render_file(Path("notes.txt"), RenderConfig(color=True))
    """
    config = config or RenderConfig()
    validate_config(config)

    enforce_file_size(collect_file_stat(filepath), config.max_file_size, filepath)
    return render_lines(read_lines(filepath), build_painter(config))
