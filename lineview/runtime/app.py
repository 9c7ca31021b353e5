"""Session bootstrap: terminal setup, buffer load, and loop hand-off."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ..buffer import load_file
from ..state import ViewerState
from .config import ViewerConfig
from .loop import run_session
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def run_viewer(
    path: Path | None,
    config: ViewerConfig,
    terminal: TerminalController | None = None,
) -> int:
    """Open a raw-mode session on ``path`` (or an empty buffer) and run it.

    Raw mode is released before this returns or raises, whichever way the
    session ends.
    """
    if terminal is None:
        terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())

    with terminal.raw_mode():
        screenrows, screencols = terminal.query_window_size()
        state = ViewerState(screenrows=screenrows, screencols=screencols)
        if path is not None:
            load_file(path, state.buffer)
        logger.info(
            "session started: %dx%d terminal, %d rows from %s",
            screenrows,
            screencols,
            state.numrows,
            path if path is not None else "<empty>",
        )
        return run_session(state, terminal, config)
