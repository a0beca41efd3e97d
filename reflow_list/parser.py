"""Line parsing utilities."""

from __future__ import annotations

from .models import ParsedLine, ReflowSettings


def expand_tabs(line: str, tab_size: int) -> str:
    """Replace tabs with spaces up to the next tab stop.

    Columns are counted on the expanded text, so each tab's width depends on
    everything before it.

    Args:
        line: Text to expand.
        tab_size: Columns per tab stop.

    Returns:
        str: `line` without tab characters.

    Examples:
        expand_tabs("\\t\\tx", 4)  # "        x"
        expand_tabs("\\ty\\tx", 4)  # "    y   x"
    """
    return line.expandtabs(tab_size)


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def _leading_whitespace(text: str) -> str:
    return text[: len(text) - len(text.lstrip())]


def parse_line(line: str, settings: ReflowSettings) -> ParsedLine:
    """Split a line into prefix, marker, and content.

    The comment pattern is consumed first, together with any whitespace that
    follows it. A definition marker is tried next and, failing that, a list
    marker. Both marker patterns are responsible for the whitespace after the
    marker. Whatever is left is the content.

    Args:
        line: Raw line, with or without its line ending.
        settings: Patterns and tab size to apply.

    Returns:
        ParsedLine: The line's structural parts. Fields that did not match are
            empty strings.

    Examples:
        parse_line("    // 1. first item\\n", settings)
        # ParsedLine(prefix="    // ", list_marker="1. ", content="first item")
    """
    rest = expand_tabs(_strip_line_ending(line), settings.tab_size)

    prefix = ""
    comment_match = settings.comment_pattern.match(rest)
    if comment_match:
        prefix = comment_match.group(0)
        rest = rest[len(prefix) :]

    whitespace = _leading_whitespace(rest)
    prefix += whitespace
    rest = rest[len(whitespace) :]

    definition_marker = ""
    list_marker = ""
    definition_match = settings.definition_pattern.match(rest)
    # Empty matches do not count as markers.
    if definition_match and definition_match.group(0):
        definition_marker = definition_match.group(0)
        rest = rest[len(definition_marker) :]
    else:
        list_match = settings.list_start_pattern.match(rest)
        if list_match and list_match.group(0):
            list_marker = list_match.group(0)
            rest = rest[len(list_marker) :]

    return ParsedLine(
        prefix=prefix,
        definition_marker=definition_marker,
        list_marker=list_marker,
        content=rest,
    )
