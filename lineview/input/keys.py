"""Key token vocabulary shared by the decoder and the session dispatch.

Tokens are plain strings so literal characters and composite keys travel
through the same dispatch path.
"""

from __future__ import annotations

UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
HOME = "HOME"
END = "END"
PAGE_UP = "PAGE_UP"
PAGE_DOWN = "PAGE_DOWN"
DELETE = "DELETE"
ESC = "ESC"

ARROW_KEYS = frozenset({UP, DOWN, LEFT, RIGHT})
PAGE_KEYS = frozenset({PAGE_UP, PAGE_DOWN})

_SPECIAL_CONTROL_TOKENS = {
    0x00: "NUL",
    0x08: "BACKSPACE",
    0x09: "TAB",
    0x0A: "ENTER_LF",
    0x0D: "ENTER_CR",
    0x7F: "BACKSPACE",
}


def ctrl_token(letter: str) -> str:
    """Token produced by Ctrl+``letter``, e.g. ``ctrl_token("q") == "CTRL_Q"``."""
    return f"CTRL_{letter.upper()}"


QUIT_KEY = ctrl_token("q")


def token_for_byte(value: int) -> str:
    """Map one non-ESC input byte to its key token.

    Ctrl+letter combinations become ``CTRL_<LETTER>``; remaining C0 bytes get
    a hex token; everything else is the byte as a one-character string.
    """
    special = _SPECIAL_CONTROL_TOKENS.get(value)
    if special is not None:
        return special
    if 0x01 <= value <= 0x1A:
        return ctrl_token(chr(value + 0x40))
    if value < 0x20:
        return f"CTRL_0x{value:02X}"
    return bytes([value]).decode("latin-1")
