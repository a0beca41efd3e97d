"""Detection of ``/* ... */`` block comment context."""

from __future__ import annotations

from collections.abc import Sequence

from .constants import (
    BLOCK_COMMENT_LINE_PATTERN,
    BLOCK_COMMENT_OPEN_PATTERN,
)
from .models import ReflowSettings


def in_block_comment(lines: Sequence[str], anchor: int) -> bool:
    """Determine whether the anchor line continues a block comment.

    The anchor must look like a block comment body line (`` * text``). Lines
    above it with the same shape are skipped; the comment is open when the
    first line that breaks the run opens a block comment (``/*`` or ``/**``).

    Args:
        lines: Buffer lines.
        anchor: Zero-based index of the anchor line.

    Returns:
        bool: True when the anchor sits inside a block comment.

    Examples:
        in_block_comment(["/*", " * text", " */"], 1)  # True
        in_block_comment(["text", " * item"], 1)  # False
    """
    anchor_line = lines[anchor]
    if not BLOCK_COMMENT_LINE_PATTERN.match(anchor_line):
        return False

    index = anchor - 1
    while index >= 0 and BLOCK_COMMENT_LINE_PATTERN.match(lines[index]):
        index -= 1

    return index >= 0 and BLOCK_COMMENT_OPEN_PATTERN.match(lines[index]) is not None


def settings_for_anchor(
    lines: Sequence[str], anchor: int, settings: ReflowSettings
) -> ReflowSettings:
    """Pick the settings to reflow the paragraph at `anchor` with.

    Inside a block comment the leading ``*`` belongs to the comment, so the
    block comment pattern replaces the regular comment pattern.
    """
    if in_block_comment(lines, anchor):
        return settings.with_comment_pattern(settings.block_comment_pattern)
    return settings
