"""
Renders Markdown for the terminal.
Reads a document from a file or stdin and writes it to stdout with code
blocks syntax-highlighted in 24-bit colour.
"""

from __future__ import annotations

from typing import BinaryIO

import click
from .exceptions import InputError
from .renderer import render_markdown
from .source import read_source

__all__ = ["cli"]


@click.command()
@click.version_option()
@click.argument("source", type=click.File("rb"), default="-")
def cli(source: BinaryIO):
    """
    Entry point for rendering a Markdown document to the terminal.

    Args:
        source: Binary stream holding the Markdown document (stdin by default).

    Returns:
        None.

    Raises:
        click.ClickException: If the input cannot be read, is not valid UTF-8,
            or exceeds the size limit.

    Examples:
        term-markdown README.md
        cat notes.md | term-markdown
    """
    name = click.format_filename(getattr(source, "name", "<stdin>"))
    try:
        text = read_source(source, name=name)
    except InputError as error:
        raise click.ClickException(str(error)) from error

    click.echo(render_markdown(text), nl=False)


if __name__ == "__main__":
    cli()
