"""
Renders a text file with inline markup as styled terminal output.
The whole file is rendered before anything is written to stdout.
"""

from __future__ import annotations

import logging
import sys

import click
from .config import COLOR_NAMES, ConfigError, build_config
from .exceptions import ArgumentCountError, FileOpenError, LineReadError, PathNotFoundError
from .filesystem import validate_arguments
from .renderer import render_file

__all__ = ["cli"]

_color_choice = click.Choice(COLOR_NAMES)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


@click.command()
@click.version_option(package_name="term-markup")
@click.option("--color/--no-color", default=None, help="Force or suppress ANSI styling")
@click.option("--number-color", type=_color_choice, help="Colour for numbers")
@click.option("--single-quote-color", type=_color_choice, help="Colour for 'single-quoted' text")
@click.option("--double-quote-color", type=_color_choice, help='Colour for "double-quoted" text')
@click.option("--highlight-color", type=_color_choice, help="Background colour for `highlights`")
@click.option("--max-file-size", type=int, help="Maximum file size in bytes")
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr")
@click.argument("filepaths", nargs=-1, metavar="FILEPATH")
def cli(
    filepaths: tuple[str, ...],
    color: bool | None = None,
    number_color: str | None = None,
    single_quote_color: str | None = None,
    double_quote_color: str | None = None,
    highlight_color: str | None = None,
    max_file_size: int | None = None,
    verbose: bool = False,
):
    """
    Entry point for rendering a marked-up text file to the terminal.

    Args:
        filepaths: Positional arguments; exactly one path is accepted.
        color: Force (True) or suppress (False) styling; None auto-detects.
        number_color: Override for the number colour.
        single_quote_color: Override for the single-quoted string colour.
        double_quote_color: Override for the double-quoted string colour.
        highlight_color: Override for the highlight background colour.
        max_file_size: Override for the maximum file size in bytes.
        verbose: Enable debug logging on stderr.

    Returns:
        None.

    Raises:
        click.UsageError: If zero or several paths are given.
        click.BadParameter: If the path does not exist or an option value is
            invalid.
        click.ClickException: If the file cannot be opened or read.

    Examples:
        term-markup notes.txt --color --highlight-color blue
    """
    _configure_logging(verbose)

    try:
        filepath = validate_arguments(filepaths)
    except ArgumentCountError as error:
        raise click.UsageError(str(error)) from error
    except PathNotFoundError as error:
        raise click.BadParameter(str(error), param_hint="FILEPATH") from error

    try:
        config = build_config(
            color=color,
            number_color=number_color,
            single_quote_color=single_quote_color,
            double_quote_color=double_quote_color,
            highlight_color=highlight_color,
            max_file_size=max_file_size,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        output = render_file(filepath, config)
    except (FileOpenError, LineReadError) as error:
        raise click.ClickException(str(error)) from error

    click.echo(output, nl=False, color=config.color)


if __name__ == "__main__":
    cli()
