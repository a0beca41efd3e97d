"""Data models for reflow-list."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ReflowSettings:
    """Compiled, validated configuration consumed by the reflow engine.

    Instances are produced by `reflow_list.config.compile_settings` and never
    change afterwards.

    Attributes:
        comment_pattern: Matches a comment marker at the start of a line.
        list_start_pattern: Matches a list marker and its trailing whitespace.
        definition_pattern: Matches a definition term and its trailing whitespace.
        paragraph_end_pattern: Matches content that ends a paragraph outright.
        block_comment_pattern: Comment pattern used inside ``/* ... */`` blocks.
        wrap_column: Target maximum line width.
        extra_indent_for_definitions: Continuation indent for definition bodies.
        tab_size: Columns per tab stop.
    """

    comment_pattern: re.Pattern[str]
    list_start_pattern: re.Pattern[str]
    definition_pattern: re.Pattern[str]
    paragraph_end_pattern: re.Pattern[str]
    block_comment_pattern: re.Pattern[str]
    wrap_column: int
    extra_indent_for_definitions: int
    tab_size: int

    def with_comment_pattern(self, pattern: re.Pattern[str]) -> ReflowSettings:
        """Return a copy that uses `pattern` to recognize comment prefixes."""
        return replace(self, comment_pattern=pattern)


@dataclass(frozen=True)
class ParsedLine:
    """A line split into its structural parts.

    Attributes:
        prefix: Comment marker and indentation preceding the text.
        definition_marker: Definition term and trailing whitespace, if any.
        list_marker: List marker and trailing whitespace, if any.
        content: Remaining prose, without the line ending.
    """

    prefix: str = ""
    definition_marker: str = ""
    list_marker: str = ""
    content: str = ""

    @property
    def marker(self) -> str:
        """The definition or list marker, whichever the line carries."""
        return self.definition_marker or self.list_marker


@dataclass(frozen=True)
class ReflowResult:
    """Replacement produced for one paragraph.

    Attributes:
        first_line: Zero-based index of the first replaced line.
        last_line: Zero-based index one past the last replaced line.
        text: Rendered paragraph, ending with a single newline.
    """

    first_line: int
    last_line: int
    text: str
