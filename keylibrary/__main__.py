"""Entry point for running `python -m keylibrary`."""

import sys

from .main import main


def _run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    _run()
