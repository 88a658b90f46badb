"""here pipeline package.

This package contains the resolve and transform stages and the orchestrator
that runs them in order.
"""

from .orchestrator import HerePipeline
from .resolver import resolve_location
from .transformer import transform_path

__all__ = ["HerePipeline", "resolve_location", "transform_path"]
