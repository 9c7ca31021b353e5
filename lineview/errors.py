"""Fatal error taxonomy for the viewer.

Every error here ends the session: the terminal is restored while the
exception unwinds and the CLI prints a one-line diagnostic.
"""

from __future__ import annotations


class ViewerError(Exception):
    """Base class for unrecoverable viewer failures.

    ``os_error`` keeps the originating ``OSError`` (if any) so the diagnostic
    can mirror ``perror`` output: ``"<message>: <strerror>"``.
    """

    def __init__(self, message: str, os_error: OSError | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.os_error = os_error

    def __str__(self) -> str:
        if self.os_error is None:
            return self.message
        detail = self.os_error.strerror or str(self.os_error)
        return f"{self.message}: {detail}"


class TerminalError(ViewerError):
    """Terminal attribute get/set or window-size query failed."""


class IoError(ViewerError):
    """Read or write on the terminal failed for a reason other than "no data yet"."""


class FileError(ViewerError):
    """The file given on the command line could not be opened or read."""
