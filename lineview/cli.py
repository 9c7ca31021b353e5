"""Command-line front door for lineview.

Parses the optional file argument, loads config and logging, then runs the
interactive session. Fatal errors exit with status 1 after a screen clear.
"""

from __future__ import annotations

import argparse
import contextlib
import logging
import os
import sys
from pathlib import Path

from . import __version__
from .ansi import CLEAR_SCREEN, CURSOR_HOME
from .errors import ViewerError
from .runtime import run_viewer
from .runtime.config import load_viewer_config
from .runtime.logs import configure_logging

logger = logging.getLogger(__name__)

EXIT_FATAL = 1
EXIT_INTERRUPTED = 130


def _report_fatal(error: BaseException) -> None:
    """Clear the screen (best effort) and print a ``perror``-style line."""
    with contextlib.suppress(OSError, ValueError):
        os.write(sys.stdout.fileno(), CLEAR_SCREEN + CURSOR_HOME)
    sys.stderr.write(f"lineview: {error}\n")
    sys.stderr.flush()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lineview",
        description="View a text file in a scrollable raw-mode terminal viewport. Ctrl-Q quits.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="File to view. Starts with an empty buffer when omitted.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the viewer; always exits via ``SystemExit``."""
    args = build_parser().parse_args(argv)

    config = load_viewer_config()
    configure_logging(config.log_level)

    path = Path(args.path) if args.path is not None else None
    try:
        status = run_viewer(path, config)
    except ViewerError as exc:
        logger.error("fatal: %s", exc)
        _report_fatal(exc)
        raise SystemExit(EXIT_FATAL) from exc
    except KeyboardInterrupt:
        _report_fatal(KeyboardInterrupt("interrupted"))
        raise SystemExit(EXIT_INTERRUPTED) from None
    raise SystemExit(status)


if __name__ == "__main__":
    main()
