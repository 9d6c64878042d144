"""Package-specific exception types."""

from __future__ import annotations

from pathlib import Path


class TermMarkupError(Exception):
    """Base class for errors raised by term-markup."""


class ArgumentCountError(TermMarkupError, ValueError):
    """Raised when zero or more than one file path is supplied.

    Args:
        arguments: Positional arguments received on the command line.
        reason: Human-readable description of the problem.
    """

    def __init__(self, arguments: list[str], reason: str):
        self.arguments = arguments
        self.reason = reason
        super().__init__(f"Could not parse program arguments {arguments!r}: {reason}")


class PathNotFoundError(TermMarkupError, ValueError):
    """Raised when the supplied path does not reference an existing entry.

    Args:
        path: The path that could not be found.
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"Could not parse program arguments {[path]!r}: Path does not exist"
        )


class FileOpenError(TermMarkupError, OSError):
    """Raised when an existing path cannot be opened or inspected."""


class FileTooLargeError(FileOpenError):
    """Raised when a file exceeds the configured maximum size.

    Args:
        filepath: Path to the oversized file.
        max_size: Maximum allowed size in bytes.
    """

    def __init__(self, filepath: Path, max_size: int):
        self.filepath = filepath
        self.max_size = max_size
        super().__init__(f"{filepath} exceeds the maximum allowed size of {max_size} bytes.")


class LineReadError(TermMarkupError, OSError):
    """Raised when a line of the input file cannot be decoded.

    Args:
        filepath: File being read.
        line_number: One-based index of the offending line.
        reason: Description of the underlying failure.
    """

    def __init__(self, filepath: Path, line_number: int, reason: str):
        self.filepath = filepath
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Could not read line {line_number} of {filepath}: {reason}")
