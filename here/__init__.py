"""Top-level package for here.

This package resolves a filesystem location (working directory, a path segment
below it, or an executable found on the system), formats it, and delivers it to
the clipboard, the terminal, and optionally the shell. The main orchestration
entry point is `HerePipeline`.
"""

from .pipeline import HerePipeline

__all__ = ["HerePipeline", "__version__"]

__version__ = "0.3.0"
