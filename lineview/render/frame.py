"""Frame composition for the single-pane viewer.

One ``bytearray`` is reused across frames: cleared, refilled with the whole
screen image, then handed to the terminal in one write.
"""

from __future__ import annotations

from typing import Protocol

from .. import __version__
from ..ansi import CURSOR_HOME, ERASE_LINE_RIGHT, HIDE_CURSOR, ROW_SEPARATOR, SHOW_CURSOR, cursor_to
from ..state import ViewerState
from ..viewport import recompute_scroll

EMPTY_ROW_MARKER = b"~"


class FrameSink(Protocol):
    def write(self, data: bytes) -> None: ...


def welcome_message() -> bytes:
    return f"lineview -- version {__version__}".encode("ascii")


def welcome_row(screencols: int, message: bytes | None = None) -> bytes:
    """Banner clipped to ``screencols`` and centered behind a ``~`` marker."""
    text = welcome_message() if message is None else message
    text = text[: max(0, screencols)]
    padding = (screencols - len(text)) // 2
    out = bytearray()
    if padding:
        out += EMPTY_ROW_MARKER
        padding -= 1
    out += b" " * padding
    out += text
    return bytes(out)


class FrameRenderer:
    """Compose and flush frames for one session."""

    def __init__(self) -> None:
        self._frame = bytearray()

    def _draw_rows(self, state: ViewerState) -> None:
        out = self._frame
        numrows = state.numrows
        for y in range(state.screenrows):
            filerow = y + state.rowoff
            if filerow >= numrows:
                if numrows == 0 and y == state.screenrows // 3:
                    out += welcome_row(state.screencols)
                else:
                    out += EMPTY_ROW_MARKER
            else:
                chars = state.buffer.row(filerow).chars
                length = min(max(0, len(chars) - state.coloff), state.screencols)
                if length:
                    out += chars[state.coloff : state.coloff + length]

            out += ERASE_LINE_RIGHT
            # No separator after the last row; it would scroll the terminal.
            if y < state.screenrows - 1:
                out += ROW_SEPARATOR

    def build_frame(self, state: ViewerState) -> bytes:
        """Return the visible rows as one byte string, without cursor control."""
        self._frame.clear()
        self._draw_rows(state)
        return bytes(self._frame)

    def refresh_screen(self, state: ViewerState, sink: FrameSink) -> bytes:
        """Scroll, compose the full frame, and write it with one call.

        Returns the bytes written.
        """
        recompute_scroll(state)

        out = self._frame
        out.clear()
        out += HIDE_CURSOR
        out += CURSOR_HOME
        self._draw_rows(state)
        out += cursor_to(state.cy - state.rowoff + 1, state.cx - state.coloff + 1)
        out += SHOW_CURSOR

        payload = bytes(out)
        sink.write(payload)
        out.clear()
        return payload
