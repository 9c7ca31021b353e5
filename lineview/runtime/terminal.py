"""Terminal control helpers for the viewer session.

Owns the raw-mode lifecycle and the window-size query.
All terminal output funnels through ``write`` so one frame is one syscall.
"""

from __future__ import annotations

import contextlib
import fcntl
import logging
import os
import re
import struct
import termios
import tty

from ..ansi import CLEAR_SCREEN, CURSOR_FAR_BOTTOM_RIGHT, CURSOR_HOME, CURSOR_POSITION_REQUEST
from ..errors import IoError, TerminalError

logger = logging.getLogger(__name__)

CURSOR_REPORT_MAX_BYTES = 31
_CURSOR_REPORT_RE = re.compile(rb"\x1b\[(\d+);(\d+)")

# Deciseconds a raw read waits before returning zero bytes.
RAW_READ_TIMEOUT_DECISECONDS = 1


def _os_error(exc: BaseException) -> OSError:
    """Normalize ``termios.error`` (errno, message) pairs into an ``OSError``."""
    if isinstance(exc, OSError):
        return exc
    args = getattr(exc, "args", ())
    if len(args) >= 2 and isinstance(args[0], int):
        return OSError(args[0], str(args[1]))
    return OSError(str(exc))


def raw_attributes(saved: list) -> list:
    """Return a raw-mode copy of the ``tcgetattr`` list ``saved``.

    Input is byte-at-a-time with no echo, no signal keys, no CR/NL
    translation and no output post-processing. Reads return after
    ``RAW_READ_TIMEOUT_DECISECONDS`` even when no byte arrived.
    """
    mode = list(saved)
    mode[tty.IFLAG] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
    mode[tty.OFLAG] &= ~termios.OPOST
    mode[tty.CFLAG] |= termios.CS8
    mode[tty.LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
    cc = list(mode[tty.CC])
    cc[termios.VMIN] = 0
    cc[termios.VTIME] = RAW_READ_TIMEOUT_DECISECONDS
    mode[tty.CC] = cc
    return mode


class TerminalController:
    """Manage raw-mode transitions and terminal geometry for one session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state: list | None = None

    @property
    def raw_enabled(self) -> bool:
        return self._saved_tty_state is not None

    def enable_raw_mode(self) -> None:
        """Save current tty attributes and switch the input fd to raw mode."""
        try:
            saved = termios.tcgetattr(self.stdin_fd)
        except termios.error as exc:
            raise TerminalError("tcgetattr", _os_error(exc)) from exc
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, raw_attributes(saved))
        except termios.error as exc:
            raise TerminalError("tcsetattr", _os_error(exc)) from exc
        self._saved_tty_state = saved

    def disable_raw_mode(self) -> None:
        """Restore the attributes saved by ``enable_raw_mode``.

        Restores at most once; later calls are no-ops.
        """
        saved = self._saved_tty_state
        if saved is None:
            return
        self._saved_tty_state = None
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, saved)
        except termios.error as exc:
            raise TerminalError("tcsetattr", _os_error(exc)) from exc

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that keeps the terminal raw for the enclosed block."""
        self.enable_raw_mode()
        try:
            yield self
        finally:
            self.disable_raw_mode()

    def write(self, data: bytes) -> None:
        """Write ``data`` with a single ``os.write`` call."""
        try:
            os.write(self.stdout_fd, data)
        except OSError as exc:
            raise IoError("write", exc) from exc

    def clear_screen(self) -> None:
        self.write(CLEAR_SCREEN + CURSOR_HOME)

    def query_window_size(self) -> tuple[int, int]:
        """Return ``(rows, cols)`` for the output terminal.

        Uses ``TIOCGWINSZ`` first. When the ioctl fails or reports zero columns,
        pushes the cursor to the far bottom-right and reads back its position.
        """
        try:
            packed = fcntl.ioctl(self.stdout_fd, termios.TIOCGWINSZ, struct.pack("HHHH", 0, 0, 0, 0))
            rows, cols, _xpixel, _ypixel = struct.unpack("HHHH", packed)
        except OSError:
            rows, cols = 0, 0
        if cols > 0 and rows > 0:
            return rows, cols

        logger.info("TIOCGWINSZ unavailable; falling back to cursor position report")
        try:
            self.write(CURSOR_FAR_BOTTOM_RIGHT)
        except IoError as exc:
            raise TerminalError("get_window_size", exc.os_error) from exc
        return self.cursor_position()

    def cursor_position(self) -> tuple[int, int]:
        """Request a cursor position report and parse ``ESC [ rows ; cols R``."""
        try:
            self.write(CURSOR_POSITION_REQUEST)
        except IoError as exc:
            raise TerminalError("get_cursor_position", exc.os_error) from exc

        reply = bytearray()
        while len(reply) < CURSOR_REPORT_MAX_BYTES:
            try:
                ch = os.read(self.stdin_fd, 1)
            except BlockingIOError:
                break
            except OSError as exc:
                raise TerminalError("get_cursor_position", exc) from exc
            if not ch or ch == b"R":
                break
            reply += ch

        match = _CURSOR_REPORT_RE.fullmatch(bytes(reply))
        if match is None:
            raise TerminalError(f"get_window_size: unexpected cursor report {bytes(reply)!r}")
        rows, cols = int(match.group(1)), int(match.group(2))
        if rows <= 0 or cols <= 0:
            raise TerminalError(f"get_window_size: invalid size {rows}x{cols}")
        return rows, cols
