"""Module entrypoint for running here as ``python -m here``."""

from __future__ import annotations

from here.cli import main


if __name__ == "__main__":
    main()
