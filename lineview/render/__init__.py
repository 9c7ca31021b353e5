"""Rendering engine for the viewer: frame composition and atomic flush."""

from __future__ import annotations

from .frame import EMPTY_ROW_MARKER, FrameRenderer, FrameSink, welcome_message, welcome_row

__all__ = [
    "EMPTY_ROW_MARKER",
    "FrameRenderer",
    "FrameSink",
    "welcome_message",
    "welcome_row",
]
