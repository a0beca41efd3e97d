"""Paragraph accumulation and re-wrapping."""

from __future__ import annotations

from .exceptions import ProtocolError
from .models import ReflowSettings
from .parser import parse_line


class ReflowBuilder:
    """Collect the lines of one paragraph and re-wrap them.

    The builder is seeded with the anchor line, then offered the lines above
    it one at a time until it finds the paragraph's beginning (or rejects a
    line), then the lines below until it finds the end. A marker seen while
    moving up is the paragraph's first line; a marker seen while moving down
    starts the next paragraph.

    Typical usage:

        builder = ReflowBuilder(settings, lines[anchor])
        while not builder.found_begin and first > 0:
            if not builder.extend_upward(lines[first - 1]):
                break
            first -= 1
        while not builder.found_end and last < len(lines):
            if not builder.extend_downward(lines[last]):
                break
            last += 1
        replacement = builder.render()

    Args:
        settings: Compiled patterns and layout values.
        anchor_line: The line the paragraph is built around.
    """

    def __init__(self, settings: ReflowSettings, anchor_line: str):
        self._settings = settings
        self._found_begin = False
        self._found_end = False

        parsed = parse_line(anchor_line, settings)
        self._continuation_prefix = parsed.prefix
        if parsed.definition_marker:
            self._found_begin = True
            self._first_line_prefix = parsed.prefix + parsed.definition_marker
            self._continuation_prefix = parsed.prefix + " " * settings.extra_indent_for_definitions
        elif parsed.list_marker:
            self._found_begin = True
            self._first_line_prefix = parsed.prefix + parsed.list_marker
            self._continuation_prefix = parsed.prefix + " " * len(parsed.list_marker)
        else:
            self._first_line_prefix = parsed.prefix
            if not parsed.content:
                # An empty line is a paragraph of its own.
                self._found_begin = True
                self._found_end = True

        if self._ends_paragraph(parsed.content):
            self._found_begin = True
            self._found_end = True

        self._text = parsed.content

    @property
    def found_begin(self) -> bool:
        return self._found_begin

    @property
    def found_end(self) -> bool:
        return self._found_end

    @property
    def text(self) -> str:
        return self._text

    @property
    def first_line_prefix(self) -> str:
        return self._first_line_prefix

    @property
    def continuation_prefix(self) -> str:
        return self._continuation_prefix

    def _ends_paragraph(self, content: str) -> bool:
        return self._settings.paragraph_end_pattern.match(content) is not None

    def extend_upward(self, line: str) -> bool:
        """Try to add the line directly above the paragraph.

        Args:
            line: Candidate line.

        Returns:
            bool: True when the line belongs to the paragraph and was added.

        Raises:
            ProtocolError: If the paragraph's beginning was already found.
        """
        if self._found_begin:
            raise ProtocolError("upward")

        parsed = parse_line(line, self._settings)
        if not parsed.content or self._ends_paragraph(parsed.content):
            return False

        if parsed.definition_marker:
            # Different indentation means a different nesting level.
            if parsed.prefix + "  " != self._continuation_prefix:
                return False
        elif parsed.list_marker:
            if parsed.prefix + " " * len(parsed.list_marker) != self._continuation_prefix:
                return False
        elif parsed.prefix != self._continuation_prefix:
            return False

        if parsed.marker:
            self._found_begin = True
            self._first_line_prefix = parsed.prefix + parsed.marker

        self._text = f"{parsed.content} {self._text}"
        return True

    def extend_downward(self, line: str) -> bool:
        """Try to add the line directly below the paragraph.

        Args:
            line: Candidate line.

        Returns:
            bool: True when the line continues the paragraph and was added.

        Raises:
            ProtocolError: If the paragraph's end was already found.
        """
        if self._found_end:
            raise ProtocolError("downward")

        parsed = parse_line(line, self._settings)
        if not parsed.content or self._ends_paragraph(parsed.content):
            return False
        if parsed.marker:
            return False
        if parsed.prefix != self._continuation_prefix:
            return False

        self._text = f"{self._text} {parsed.content}"
        return True

    def render(self) -> str:
        """Re-wrap the collected text.

        Words are placed greedily. A word never gets split, so a line holding a
        single long word can exceed the wrap column.

        Returns:
            str: Replacement text for the covered lines, ending with a newline.
        """
        wrap_column = self._settings.wrap_column
        lines = []
        current = self._first_line_prefix
        column = len(current)
        first_word = True

        for word in self._text.split():
            if first_word:
                current += word
                column += len(word)
                first_word = False
            elif column + 1 + len(word) > wrap_column:
                lines.append(current)
                current = self._continuation_prefix + word
                column = len(current)
            else:
                current += " " + word
                column += 1 + len(word)

        lines.append(current)
        return "\n".join(lines) + "\n"
