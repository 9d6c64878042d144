"""Filesystem helpers for term-markup."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import BinaryIO

from .exceptions import (
    ArgumentCountError,
    FileOpenError,
    FileTooLargeError,
    LineReadError,
    PathNotFoundError,
)

logger = logging.getLogger(__name__)


def validate_arguments(arguments: Sequence[str]) -> Path:
    """Check the positional command-line arguments and return the file path.

    Args:
        arguments: Positional arguments, excluding the program name.

    Returns:
        Path: The single path argument.

    Raises:
        ArgumentCountError: If no argument or more than one argument is given.
        PathNotFoundError: If the path does not reference an existing entry.

    Examples:
        validate_arguments(["notes.txt"])
    """
    if not arguments:
        raise ArgumentCountError(list(arguments), "No arguments provided")

    if len(arguments) > 1:
        raise ArgumentCountError(list(arguments), "Too many arguments provided.")

    path = Path(arguments[0])
    if not path.exists():
        raise PathNotFoundError(arguments[0])

    return path


def collect_file_stat(filepath: Path) -> os.stat_result:
    """Return stat information for a file.

    Args:
        filepath: Path to the file.

    Returns:
        os.stat_result: File metadata.

    Raises:
        FileOpenError: If the path cannot be inspected.

    Examples:
        stat_result = collect_file_stat(Path("notes.txt"))
    """
    try:
        return os.stat(filepath)
    except OSError as error:
        error_message = f"Error accessing {filepath}: {error}"
        raise FileOpenError(error_message) from error


def enforce_file_size(stat_result: os.stat_result, max_size: int, filepath: Path):
    """Guard against files that exceed the configured maximum size.

    Args:
        stat_result: File stat used to determine size in bytes.
        max_size: Maximum allowed size in bytes.
        filepath: Path to the file being checked.

    Returns:
        None.

    Raises:
        FileTooLargeError: If `stat_result.st_size` exceeds `max_size`.

    Examples:
        enforce_file_size(os.stat("notes.txt"), 102400, Path("notes.txt"))
    """
    if stat_result.st_size > max_size:
        raise FileTooLargeError(filepath, max_size)


def safe_read(filepath: Path) -> BinaryIO:
    """Open a file for reading with consistent error handling.

    The handle is binary so that each line can be decoded on its own and a
    decoding failure can be tied to a line number.

    Args:
        filepath: Path to the file.

    Returns:
        BinaryIO: File handle opened for binary reading.

    Raises:
        FileOpenError: If the path is missing, inaccessible, or not a file.

    Examples:
        with safe_read(Path("notes.txt")) as handle:
            first_line = handle.readline()
    """
    try:
        return open(filepath, "rb")
    except OSError as error:
        error_message = f"Error accessing {filepath}: {error}"
        raise FileOpenError(error_message) from error


def read_lines(filepath: Path) -> Iterator[str]:
    """Yield the lines of a file with their terminators stripped.

    Both ``\\n`` and ``\\r\\n`` terminators are removed.

    Args:
        filepath: Path to the file.

    Yields:
        str: One line at a time, in file order.

    Raises:
        FileOpenError: If the file cannot be opened.
        LineReadError: If a line is not valid UTF-8 or cannot be read.

    Examples:
        for line in read_lines(Path("notes.txt")):
            print(line)
    """
    logger.debug("Reading %s", filepath)
    line_number = 0
    with safe_read(filepath) as handle:
        while True:
            try:
                raw_line = handle.readline()
            except OSError as error:
                raise LineReadError(filepath, line_number + 1, str(error)) from error
            if not raw_line:
                break
            line_number += 1
            try:
                line = raw_line.decode("UTF-8")
            except UnicodeDecodeError as error:
                raise LineReadError(filepath, line_number, f"invalid UTF-8: {error}") from error
            yield line.removesuffix("\n").removesuffix("\r")
    logger.debug("Read %d lines from %s", line_number, filepath)
