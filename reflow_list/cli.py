"""
Reflows the paragraph around a line of a text file.
With --in-place the file is rewritten; otherwise the result goes to stdout.
"""

from __future__ import annotations

from pathlib import Path

import click
from .config import ConfigError, build_config, compile_settings
from .exceptions import AnchorOutOfRangeError, SourceFileError
from .filesystem import max_file_size
from .reflow import reflow_file

__all__ = ["cli"]


@click.command()
@click.version_option()
@click.option(
    "--line",
    "line_number",
    type=click.IntRange(min=1),
    required=True,
    help="Line inside the paragraph to reflow (1-based)",
)
@click.option("--wrap-column", type=int, help="Target maximum line width")
@click.option("--tab-size", type=int, help="Columns per tab stop")
@click.option(
    "--extra-indent",
    "extra_indent_for_definitions",
    type=int,
    help="Continuation indent for definition bodies",
)
@click.option("--comment-regexp", help="Comment marker pattern")
@click.option("--list-start-regexp", help="List marker pattern")
@click.option("--definition-regexp", help="Definition term pattern")
@click.option("--paragraph-end-regexp", help="Paragraph delimiter pattern")
@click.option("--in-place", "-i", is_flag=True, help="Rewrite the file instead of printing")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def cli(
    filepath: str,
    line_number: int,
    wrap_column: int | None = None,
    tab_size: int | None = None,
    extra_indent_for_definitions: int | None = None,
    comment_regexp: str | None = None,
    list_start_regexp: str | None = None,
    definition_regexp: str | None = None,
    paragraph_end_regexp: str | None = None,
    in_place: bool = False,
):
    """
    Entry point for reflowing one paragraph of a text file.

    Args:
        filepath: Path to the file to process.
        line_number: One-based line inside the paragraph.
        wrap_column: Override for the wrap column.
        tab_size: Override for the tab size.
        extra_indent_for_definitions: Override for the definition body indent.
        comment_regexp: Override for the comment pattern.
        list_start_regexp: Override for the list marker pattern.
        definition_regexp: Override for the definition term pattern.
        paragraph_end_regexp: Override for the paragraph delimiter pattern.
        in_place: Rewrite the file instead of printing the result.

    Returns:
        None.

    Raises:
        click.BadParameter: If the line or a configuration value is invalid.
        click.ClickException: If the file cannot be read or rewritten safely.

    Examples:
        reflow-list src/main.c --line 42 --wrap-column 100 --in-place
    """
    try:
        config = build_config(
            Path(filepath).expanduser().resolve().parent,
            wrap_column=wrap_column,
            tab_size=tab_size,
            extra_indent_for_definitions=extra_indent_for_definitions,
            comment_regexp=comment_regexp,
            list_start_regexp=list_start_regexp,
            definition_regexp=definition_regexp,
            paragraph_end_regexp=paragraph_end_regexp,
        )
        settings = compile_settings(config)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_size = max_file_size(config.max_file_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        reflowed = reflow_file(
            Path(filepath),
            line_number - 1,
            settings,
            max_size=max_size,
            in_place=in_place,
            warn=lambda message: click.echo(message, err=True),
        )
    except AnchorOutOfRangeError as error:
        raise click.BadParameter(str(error), param_hint="'--line'") from error
    except SourceFileError as error:
        raise click.ClickException(str(error)) from error

    if not in_place:
        click.echo(reflowed, nl=False)


if __name__ == "__main__":
    cli()
