"""Module entrypoint for ``python -m lineview``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and runtime setup happen in ``lineview.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
