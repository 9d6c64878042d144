import pytest
from click.testing import CliRunner

from term_markup.models import StyleKind


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


def tag_paint(text: str, kind: StyleKind) -> str:
    """Paint function that wraps text in readable tags instead of escapes."""
    return f"<{kind.name}>{text}</>"


def tagged(text: str, kind: StyleKind) -> str:
    """Expected `tag_paint` output for text painted one character at a time."""
    return "".join(tag_paint(char, kind) for char in text)
