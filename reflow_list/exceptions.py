"""Package-specific exception types."""

from __future__ import annotations


class ReflowError(Exception):
    """Base class for reflow-related errors."""


class ProtocolError(ReflowError, RuntimeError):
    """Raised when a `ReflowBuilder` is extended past a boundary it already found.

    This signals a bug in the code driving the builder; continuing would
    corrupt the accumulated paragraph text.

    Args:
        direction: ``"upward"`` or ``"downward"``.
    """

    def __init__(self, direction: str):
        self.direction = direction
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        boundary = "beginning" if self.direction == "upward" else "end"
        return (
            f"Paragraph {boundary} already found; "
            f"extend_{self.direction} must not be called again"
        )


class AnchorOutOfRangeError(ReflowError, IndexError):
    """Raised when the anchor line lies outside the buffer.

    Args:
        anchor: Zero-based index of the requested anchor line.
        line_count: Number of lines in the buffer.
    """

    def __init__(self, anchor: int, line_count: int):
        self.anchor = anchor
        self.line_count = line_count
        super().__init__(f"Line {anchor + 1} is outside the document ({line_count} lines)")


class SourceFileError(ReflowError):
    """Raised when a file cannot be reflowed safely.

    Args:
        path: File being processed.
        reason: What went wrong, phrased to follow the path.
    """

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path} {reason}")
