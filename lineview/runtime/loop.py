"""Main interactive loop for the viewer.

One iteration is refresh, read one key, dispatch. The loop owns no state of
its own; everything lives on the ``ViewerState`` it is handed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..input import QUIT_KEY, read_key
from ..render import FrameRenderer
from ..state import ViewerState
from ..viewport import handle_navigation_key
from .config import ViewerConfig
from .terminal import TerminalController

logger = logging.getLogger(__name__)

EXIT_OK = 0


def dispatch_key(state: ViewerState, key: str, config: ViewerConfig) -> bool:
    """Apply ``key`` to ``state``; return ``False`` when the session should end.

    Keys that are neither quit nor navigation are ignored.
    """
    if key == QUIT_KEY:
        return False
    handle_navigation_key(state, key, config.end_key)
    return True


def run_session(
    state: ViewerState,
    terminal: TerminalController,
    config: ViewerConfig,
    *,
    renderer: FrameRenderer | None = None,
    next_key: Callable[[], str] | None = None,
) -> int:
    """Run refresh/read/dispatch cycles until the quit key; return exit status.

    ``next_key`` defaults to blocking ``read_key`` on the terminal input fd.
    """
    frame_renderer = renderer or FrameRenderer()
    if next_key is None:

        def next_key() -> str:
            return read_key(
                terminal.stdin_fd,
                escape_timeout_ms=config.escape_timeout_ms,
                poll_ms=config.read_timeout_ms,
            )

    while True:
        frame_renderer.refresh_screen(state, terminal)
        key = next_key()
        if not dispatch_key(state, key, config):
            logger.info("quit requested")
            terminal.clear_screen()
            return EXIT_OK
