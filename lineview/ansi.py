"""VT100 control sequences written by the viewer."""

from __future__ import annotations

CLEAR_SCREEN = b"\x1b[2J"
CURSOR_HOME = b"\x1b[H"
HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"
ERASE_LINE_RIGHT = b"\x1b[K"
CURSOR_FAR_BOTTOM_RIGHT = b"\x1b[999C\x1b[999B"
CURSOR_POSITION_REQUEST = b"\x1b[6n"
ROW_SEPARATOR = b"\r\n"


def cursor_to(row: int, col: int) -> bytes:
    """Absolute cursor move; ``row`` and ``col`` are 1-indexed."""
    return b"\x1b[%d;%dH" % (row, col)
