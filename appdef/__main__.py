"""Module entrypoint for running appdef as ``python -m appdef``."""

from __future__ import annotations

from appdef.cli import main


if __name__ == "__main__":
    main()
