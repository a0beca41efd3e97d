"""Constants used across the reflow-list package."""

from __future__ import annotations

import re

# Default patterns
# Comment markers: C/C++/JS (//), shell and Python (#), SQL and Lua (--),
# Lisp (;), TeX (%), and Markdown block quotes (>).
DEFAULT_COMMENT_REGEXP = r"^\s*(?://+|#+|--+|;+|%+|>+)?"
# The bare ":" covers Markdown definition-list bodies.
DEFAULT_LIST_START_REGEXP = r"^(?:[-*+]|\d+[.)]|:)\s+"
DEFAULT_DEFINITION_REGEXP = r"^(?:@param\s+\S+|@\w+|\w+:)(?:\s+|$)"
DEFAULT_PARAGRAPH_END_REGEXP = r"^(?:\"\"\"|'''|```|~~~|\*/|/\*)"
# Inside /* ... */ blocks the leading "*" is part of the comment, not a list.
DEFAULT_BLOCK_COMMENT_REGEXP = r"^\s*(?:\*(?!/))?"

DEFAULT_WRAP_COLUMN = 80
DEFAULT_EXTRA_INDENT_FOR_DEFINITIONS = 2
DEFAULT_TAB_SIZE = 4

# Pattern shape requirements
ANCHOR_PREFIXES = ("^", r"\A")
TRAILING_WHITESPACE_ENDINGS = (r"\s+", r"\s*", r"\s+)", r"\s*)", r"(?:\s+|$)")

# Line splitting, at "\n" only
LINE_BREAK_PATTERN = re.compile(r"(?<=\n)")

# Block comment detection
BLOCK_COMMENT_LINE_PATTERN = re.compile(r"^\s*\*(?:\s|$)")
BLOCK_COMMENT_OPEN_PATTERN = re.compile(r"^\s*/\*")

# Limits
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
