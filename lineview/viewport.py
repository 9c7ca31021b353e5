"""Cursor movement and scroll-offset arithmetic.

Everything here mutates only the ``ViewerState`` it is given.
"""

from __future__ import annotations

from .input.keys import ARROW_KEYS, DOWN, END, HOME, LEFT, PAGE_DOWN, PAGE_KEYS, PAGE_UP, RIGHT, UP
from .runtime.config import END_KEY_ROW, END_KEY_SCREEN
from .state import ViewerState


def move_cursor(state: ViewerState, key: str) -> None:
    """Move the cursor one cell for an arrow ``key``.

    ``cy`` stays in ``[0, numrows]``. ``cx`` never goes below zero and only
    moves right while the row at ``cy`` exists and is longer than ``cx``.
    No wrapping across line boundaries.
    """
    row = state.current_row()
    if key == LEFT:
        if state.cx != 0:
            state.cx -= 1
    elif key == RIGHT:
        if row is not None and state.cx < row.size:
            state.cx += 1
    elif key == UP:
        if state.cy != 0:
            state.cy -= 1
    elif key == DOWN:
        if state.cy < state.numrows:
            state.cy += 1


def page_cursor(state: ViewerState, key: str) -> None:
    direction = UP if key == PAGE_UP else DOWN
    for _ in range(state.screenrows):
        move_cursor(state, direction)


def end_column(state: ViewerState, end_key: str = END_KEY_SCREEN) -> int:
    """Column the END key moves to.

    ``"screen"`` targets the last terminal column whatever the row length;
    ``"row"`` targets one past the last byte of the current row.
    """
    if end_key == END_KEY_ROW:
        row = state.current_row()
        return row.size if row is not None else 0
    return max(0, state.screencols - 1)


def handle_navigation_key(state: ViewerState, key: str, end_key: str = END_KEY_SCREEN) -> bool:
    """Apply a navigation ``key``; return ``False`` for anything else."""
    if key == HOME:
        state.cx = 0
    elif key == END:
        state.cx = end_column(state, end_key)
    elif key in PAGE_KEYS:
        page_cursor(state, key)
    elif key in ARROW_KEYS:
        move_cursor(state, key)
    else:
        return False
    return True


def recompute_scroll(state: ViewerState) -> None:
    """Shift ``rowoff``/``coloff`` just enough to keep the cursor visible."""
    if state.cy < state.rowoff:
        state.rowoff = state.cy
    if state.cy >= state.rowoff + state.screenrows:
        state.rowoff = state.cy - state.screenrows + 1

    if state.cx < state.coloff:
        state.coloff = state.cx
    if state.cx >= state.coloff + state.screencols:
        state.coloff = state.cx - state.screencols + 1
