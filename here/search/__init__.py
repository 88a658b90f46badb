"""Executable search and candidate disambiguation."""

from .locator import Locator, SubprocessLocator, default_locate_command, parse_candidates
from .selection import Chooser, prompt_for_candidate

__all__ = [
    "Chooser",
    "Locator",
    "SubprocessLocator",
    "default_locate_command",
    "parse_candidates",
    "prompt_for_candidate",
]
