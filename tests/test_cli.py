from __future__ import annotations

import logging
import textwrap
from pathlib import Path

import click
import pytest

import term_markup.cli as cli_module
from term_markup.cli import cli


def _write(tmp_path: Path, filename: str, content: str) -> Path:
    path = tmp_path / filename
    path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
    return path


@pytest.fixture()
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_cli_renders_styled_output(cli_runner, tmp_path):
    target = _write(
        tmp_path,
        "doc.txt",
        """
        This is a _test_ line
        plain line
        """,
    )

    result = cli_runner.invoke(cli, [str(target)], color=True)

    assert result.exit_code == 0
    bold = "".join(click.style(char, bold=True) for char in "test")
    assert result.output == f"This is a _{bold}_ line\nplain line\n"


def test_cli_strips_styles_when_not_a_terminal(cli_runner, tmp_path):
    target = _write(
        tmp_path,
        "doc.txt",
        """
        A *quick* "brown" fox 42
        """,
    )

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert result.output == 'A *quick* "brown" fox 42\n'


def test_cli_color_flag_forces_styles(cli_runner, tmp_path):
    target = _write(tmp_path, "doc.txt", "a `b` c\n")

    result = cli_runner.invoke(cli, ["--color", str(target)])

    assert result.exit_code == 0
    assert click.style("b", bg="bright_black") in result.output


def test_cli_no_color_flag_suppresses_styles(cli_runner, tmp_path):
    target = _write(tmp_path, "doc.txt", "a `b` c\n")

    result = cli_runner.invoke(cli, ["--no-color", str(target)], color=True)

    assert result.exit_code == 0
    assert result.output == "a `b` c\n"


def test_cli_palette_overrides(cli_runner, tmp_path):
    target = _write(tmp_path, "doc.txt", "'x' `y` 7\n")

    result = cli_runner.invoke(
        cli,
        [
            "--color",
            "--single-quote-color",
            "red",
            "--highlight-color",
            "blue",
            "--number-color",
            "magenta",
            str(target),
        ],
    )

    assert result.exit_code == 0
    assert click.style("x", fg="red") in result.output
    assert click.style("y", bg="blue") in result.output
    assert click.style("7", fg="magenta") in result.output


def test_cli_rejects_unknown_color(cli_runner, tmp_path):
    target = _write(tmp_path, "doc.txt", "text\n")

    result = cli_runner.invoke(cli, ["--number-color", "chartreuse", str(target)])

    assert result.exit_code == 2


def test_cli_requires_a_path(cli_runner):
    result = cli_runner.invoke(cli, [])

    assert result.exit_code == 2
    assert "No arguments provided" in result.output


def test_cli_rejects_multiple_paths(cli_runner, tmp_path):
    first = _write(tmp_path, "one.txt", "one\n")
    second = _write(tmp_path, "two.txt", "two\n")

    result = cli_runner.invoke(cli, [str(first), str(second)])

    assert result.exit_code == 2
    assert "Too many arguments provided." in result.output


def test_cli_rejects_missing_path(cli_runner, tmp_path):
    result = cli_runner.invoke(cli, [str(tmp_path / "missing.txt")])

    assert result.exit_code == 2
    assert "Path does not exist" in result.output


def test_cli_reports_unopenable_path(cli_runner, tmp_path):
    result = cli_runner.invoke(cli, [str(tmp_path)])

    assert result.exit_code == 1
    assert "Error accessing" in result.output


def test_cli_reports_undecodable_line(cli_runner, tmp_path):
    target = tmp_path / "broken.txt"
    target.write_bytes(b"fine _line_\n\xff\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 1
    assert "Could not read line 2" in result.output
    assert "fine" not in result.output


def test_cli_enforces_max_file_size(cli_runner, tmp_path):
    target = _write(tmp_path, "doc.txt", "0123456789\n")

    result = cli_runner.invoke(cli, ["--max-file-size", "4", str(target)])

    assert result.exit_code == 1
    assert "exceeds the maximum allowed size of 4 bytes" in result.output


def test_cli_rejects_non_positive_max_file_size(cli_runner, tmp_path):
    target = _write(tmp_path, "doc.txt", "text\n")

    result = cli_runner.invoke(cli, ["--max-file-size", "0", str(target)])

    assert result.exit_code == 2
    assert "must be a positive integer" in result.output


def test_cli_verbose_logs_to_stderr(cli_runner, tmp_path, restore_logging):
    target = _write(tmp_path, "doc.txt", "one\ntwo\n")

    result = cli_runner.invoke(cli, ["--verbose", str(target)])

    assert result.exit_code == 0
    assert "Rendered 2 lines" in result.output


def test_cli_renders_empty_file(cli_runner, tmp_path):
    target = tmp_path / "empty.txt"
    target.write_text("", encoding="utf-8")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert result.output == ""


def test_cli_public_api():
    assert cli_module.__all__ == ["cli"]
