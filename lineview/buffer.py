"""In-memory line storage for the viewed file.

Rows hold raw bytes with line terminators stripped; nothing is decoded.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from .errors import FileError

logger = logging.getLogger(__name__)

LINE_TERMINATOR_BYTES = b"\r\n"


@dataclass(frozen=True)
class Row:
    """One source line, without its terminator."""

    chars: bytes

    @property
    def size(self) -> int:
        return len(self.chars)


class LineBuffer:
    """Ordered, index-addressable rows in file order."""

    def __init__(self, lines: Iterable[bytes] = ()) -> None:
        self._rows: list[Row] = []
        for line in lines:
            self.append_row(line)

    def append_row(self, data: bytes) -> Row:
        row = Row(bytes(data))
        self._rows.append(row)
        return row

    @property
    def numrows(self) -> int:
        return len(self._rows)

    def row(self, index: int) -> Row:
        """Return row ``index``; valid iff ``0 <= index < numrows``."""
        if not 0 <= index < len(self._rows):
            raise IndexError(f"row index out of range: {index}")
        return self._rows[index]

    def row_or_none(self, index: int) -> Row | None:
        if 0 <= index < len(self._rows):
            return self._rows[index]
        return None

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)


def strip_line_terminator(line: bytes) -> bytes:
    return line.rstrip(LINE_TERMINATOR_BYTES)


def load_file(path: Path, buffer: LineBuffer) -> int:
    """Append every line of ``path`` to ``buffer``; return the number added.

    Reads in binary mode so content passes through byte-for-byte apart from
    trailing ``\\n``/``\\r`` bytes.
    """
    added = 0
    try:
        with path.open("rb") as handle:
            for line in handle:
                buffer.append_row(strip_line_terminator(line))
                added += 1
    except OSError as exc:
        raise FileError(f"open {path}", exc) from exc
    logger.info("loaded %d rows from %s", added, path)
    return added
