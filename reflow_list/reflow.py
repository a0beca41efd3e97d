"""Reflow the paragraph around an anchor line."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

from .builder import ReflowBuilder
from .comments import settings_for_anchor
from .constants import DEFAULT_MAX_FILE_SIZE, LINE_BREAK_PATTERN
from .exceptions import AnchorOutOfRangeError
from .filesystem import read_source, write_source
from .models import ReflowResult, ReflowSettings


def reflow_paragraph(lines: Sequence[str], anchor: int, settings: ReflowSettings) -> ReflowResult:
    """Find the paragraph containing `anchor` and re-wrap it.

    Lines above the anchor are offered to the builder until it finds the
    paragraph's beginning or rejects a line; lines below are offered the same
    way until it finds the end. The buffer itself is never modified.

    Args:
        lines: Buffer lines, with or without line endings.
        anchor: Zero-based index of the line the paragraph is built around.
        settings: Compiled configuration.

    Returns:
        ReflowResult: The half-open line range covered by the paragraph and its
            replacement text.

    Raises:
        AnchorOutOfRangeError: If `anchor` is not a valid index into `lines`.

    Examples:
        reflow_paragraph(["line1", "line2", "line3"], 1, settings)
        # ReflowResult(first_line=0, last_line=3, text="line1 line2 line3\\n")
    """
    if not 0 <= anchor < len(lines):
        raise AnchorOutOfRangeError(anchor, len(lines))

    settings = settings_for_anchor(lines, anchor, settings)
    builder = ReflowBuilder(settings, lines[anchor])

    # Go up until we find the beginning of the paragraph
    first_line = anchor
    while not builder.found_begin and first_line > 0:
        if not builder.extend_upward(lines[first_line - 1]):
            break
        first_line -= 1

    # Go down until we find the end of the paragraph
    last_line = anchor + 1
    while not builder.found_end and last_line < len(lines):
        if not builder.extend_downward(lines[last_line]):
            break
        last_line += 1

    return ReflowResult(first_line=first_line, last_line=last_line, text=builder.render())


def split_lines(text: str) -> list[str]:
    """Split `text` into lines at ``"\\n"`` only, keeping the line endings.

    Unlike `str.splitlines`, form feeds, vertical tabs and Unicode line
    separators stay inside their line, so line numbers agree with editors.

    Examples:
        split_lines("a\\fb\\r\\nc")  # ["a\\fb\\r\\n", "c"]
    """
    lines = LINE_BREAK_PATTERN.split(text)
    if lines and not lines[-1]:
        lines.pop()
    return lines


def _line_ending(line: str) -> str:
    return "\r\n" if line.endswith("\r\n") else "\n"


def apply_reflow(lines: Sequence[str], result: ReflowResult) -> list[str]:
    """Splice a reflowed paragraph into a copy of `lines`.

    Rendered lines take the line ending of the first line they replace, so a
    CRLF buffer stays CRLF.

    Args:
        lines: Buffer lines including their line endings.
        result: Replacement returned by `reflow_paragraph`.

    Returns:
        list[str]: New buffer lines.
    """
    ending = _line_ending(lines[result.first_line])
    replacement = [line + ending for line in result.text.split("\n")[:-1]]
    return [*lines[: result.first_line], *replacement, *lines[result.last_line :]]


def reflow_text(text: str, anchor: int, settings: ReflowSettings) -> str:
    """Reflow the paragraph at `anchor` within a whole document.

    Args:
        text: Document content.
        anchor: Zero-based line index inside `text`, counting ``"\\n"`` breaks.
        settings: Compiled configuration.

    Returns:
        str: The document with the paragraph replaced. An empty document is
            returned unchanged.

    Raises:
        AnchorOutOfRangeError: If `anchor` is not a line of `text`.

    Examples:
        reflow_text("1. a\\n   b\\n2. c", 1, settings)  # "1. a b\\n2. c"
    """
    if not text:
        return text

    lines = split_lines(text)
    result = reflow_paragraph(lines, anchor, settings)
    return "".join(apply_reflow(lines, result))


def reflow_file(
    path: Path,
    anchor: int,
    settings: ReflowSettings,
    max_size: int = DEFAULT_MAX_FILE_SIZE,
    in_place: bool = False,
    warn: Callable[[str], None] | None = None,
) -> str:
    """Reflow the paragraph at `anchor` in a UTF-8 text file.

    Args:
        path: File to read.
        anchor: Zero-based line index inside the file.
        settings: Compiled configuration.
        max_size: Largest file size accepted, in bytes.
        in_place: Write the result back when it differs from the file.
        warn: Callback for non-fatal warnings raised while rewriting.

    Returns:
        str: The reflowed document.

    Raises:
        SourceFileError: If the file cannot be read or rewritten, or changed
            while being processed.
        AnchorOutOfRangeError: If `anchor` is not a line of the file.
    """
    source = read_source(path, max_size)
    reflowed = reflow_text(source.content, anchor, settings)
    if in_place and reflowed != source.content:
        write_source(source, reflowed, warn)
    return reflowed
