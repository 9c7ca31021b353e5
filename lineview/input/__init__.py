"""Input-layer public API: raw key decoding and the key token vocabulary."""

from .keys import (
    ARROW_KEYS,
    DELETE,
    DOWN,
    END,
    ESC,
    HOME,
    LEFT,
    PAGE_DOWN,
    PAGE_KEYS,
    PAGE_UP,
    QUIT_KEY,
    RIGHT,
    UP,
    ctrl_token,
    token_for_byte,
)
from .reader import ESC_SEQUENCE_TIMEOUT_MS, READ_TIMEOUT_MS, EscapeDecoder, read_key

__all__ = [
    "read_key",
    "EscapeDecoder",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "READ_TIMEOUT_MS",
    "ARROW_KEYS",
    "PAGE_KEYS",
    "QUIT_KEY",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "HOME",
    "END",
    "PAGE_UP",
    "PAGE_DOWN",
    "DELETE",
    "ESC",
    "ctrl_token",
    "token_for_byte",
]
