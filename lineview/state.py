from __future__ import annotations

from dataclasses import dataclass, field

from .buffer import LineBuffer, Row


@dataclass
class ViewerState:
    """Session context: buffer, cursor, scroll offsets and screen size."""

    screenrows: int
    screencols: int
    buffer: LineBuffer = field(default_factory=LineBuffer)
    cx: int = 0
    cy: int = 0
    rowoff: int = 0
    coloff: int = 0

    @property
    def numrows(self) -> int:
        return self.buffer.numrows

    def current_row(self) -> Row | None:
        return self.buffer.row_or_none(self.cy)
