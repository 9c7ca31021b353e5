"""Low-level terminal input decoding.

Reads raw bytes from the terminal and translates them into key tokens.
Escape sequences go through ``EscapeDecoder`` with a short per-byte deadline.
"""

from __future__ import annotations

import logging
import os
import select

from ..errors import IoError
from .keys import DELETE, DOWN, END, ESC, HOME, LEFT, PAGE_DOWN, PAGE_UP, RIGHT, UP, token_for_byte

logger = logging.getLogger(__name__)

ESC_BYTE = 0x1B
ESC_SEQUENCE_TIMEOUT_MS = 100
READ_TIMEOUT_MS = 100

_CSI_LETTER_KEYS = {
    ord("A"): UP,
    ord("B"): DOWN,
    ord("C"): RIGHT,
    ord("D"): LEFT,
    ord("H"): HOME,
    ord("F"): END,
}
_CSI_TILDE_KEYS = {
    ord("1"): HOME,
    ord("7"): HOME,
    ord("3"): DELETE,
    ord("4"): END,
    ord("8"): END,
    ord("5"): PAGE_UP,
    ord("6"): PAGE_DOWN,
}
_SS3_KEYS = {
    ord("H"): HOME,
    ord("F"): END,
}


class EscapeDecoder:
    """State machine for the bytes that follow one ESC.

    ``feed`` returns a key token once the sequence is decided and ``None``
    while more bytes are needed. At most three bytes are ever buffered.
    ``timed_out`` gives the outcome when the next byte missed its deadline.
    """

    MAX_LOOKAHEAD = 3

    def __init__(self) -> None:
        self.lookahead = bytearray()

    def feed(self, value: int) -> str | None:
        self.lookahead.append(value)
        seq = self.lookahead
        if len(seq) < 2:
            return None

        intro, second = seq[0], seq[1]
        if intro == ord("["):
            if ord("0") <= second <= ord("9"):
                if len(seq) < self.MAX_LOOKAHEAD:
                    return None
                if seq[2] == ord("~"):
                    return self._decided(_CSI_TILDE_KEYS.get(second))
                return self._decided(None)
            return self._decided(_CSI_LETTER_KEYS.get(second))
        if intro == ord("O"):
            return self._decided(_SS3_KEYS.get(second))
        return self._decided(None)

    def timed_out(self) -> str:
        return ESC

    def _decided(self, key: str | None) -> str:
        if key is None:
            logger.debug("unrecognized escape sequence %r", bytes(self.lookahead))
            return ESC
        return key


def _read_byte(fd: int) -> int | None:
    """Read one byte; ``None`` means no data (timeout, EAGAIN or EOF)."""
    try:
        ch = os.read(fd, 1)
    except BlockingIOError:
        return None
    except OSError as exc:
        raise IoError("read", exc) from exc
    if not ch:
        return None
    return ch[0]


def _read_ready_byte(fd: int, timeout_ms: int) -> int | None:
    try:
        ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    except OSError as exc:
        raise IoError("select", exc) from exc
    if not ready:
        return None
    return _read_byte(fd)


def read_key(
    fd: int,
    timeout_ms: int | None = None,
    *,
    escape_timeout_ms: int = ESC_SEQUENCE_TIMEOUT_MS,
    poll_ms: int = READ_TIMEOUT_MS,
) -> str:
    """Return the next key token read from ``fd``.

    With ``timeout_ms`` left as ``None`` this polls in ``poll_ms`` slices until
    a byte arrives. With a timeout it returns ``""`` when nothing arrived.
    """
    if timeout_ms is None:
        first = None
        while first is None:
            first = _read_ready_byte(fd, poll_ms)
    else:
        first = _read_ready_byte(fd, timeout_ms)
        if first is None:
            return ""

    if first != ESC_BYTE:
        return token_for_byte(first)

    decoder = EscapeDecoder()
    while True:
        value = _read_ready_byte(fd, escape_timeout_ms)
        if value is None:
            return decoder.timed_out()
        key = decoder.feed(value)
        if key is not None:
            return key
