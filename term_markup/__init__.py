"""
term-markup: render lightweight inline markup as styled terminal text.

Delimiters toggle a single active style per line: ``_bold_``, ``*italic*``,
``~strikethrough~``, backtick highlights, ``'single'`` and ``"double"`` quoted
strings. Digits are painted as numbers.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    term-markup notes.txt

Library Usage:
    from term_markup import render_document

    print(render_document("This is a _test_ line"), end="")
"""

from .catalog import DELIMITER_MAP, style_for
from .config import ConfigError, RenderConfig
from .exceptions import (
    ArgumentCountError,
    FileOpenError,
    FileTooLargeError,
    LineReadError,
    PathNotFoundError,
    TermMarkupError,
)
from .models import ScanState, StyleKind
from .painter import build_painter, paint
from .prescan import has_delimiter_pair
from .renderer import render_document, render_file, render_line, render_lines, style_line

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "render_line",
    "render_lines",
    "render_document",
    "render_file",
    "style_line",
    "has_delimiter_pair",
    # Painting
    "paint",
    "build_painter",
    # Data models
    "StyleKind",
    "ScanState",
    "DELIMITER_MAP",
    "style_for",
    "RenderConfig",
    # Exceptions
    "TermMarkupError",
    "ArgumentCountError",
    "PathNotFoundError",
    "FileOpenError",
    "FileTooLargeError",
    "LineReadError",
    "ConfigError",
    # Version
    "__version__",
]
