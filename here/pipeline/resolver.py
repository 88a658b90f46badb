"""Location resolution stage.

Responsibilities:
- Turn a `LocationRequest` into an un-normalized filesystem path.
- Disambiguate multi-result executable searches, non-interactively when asked.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

from ..errors import PipelineStageError
from ..models.datatypes import CurrentDirectory, LocationRequest, ProgramSearch, Segment
from ..search.locator import Locator
from ..search.selection import Chooser


def resolve_location(
    request: LocationRequest,
    *,
    select_first_option: bool,
    locator: Locator,
    chooser: Chooser,
    cwd_provider: Callable[[], str] = os.getcwd,
) -> Path:
    """Resolve the starting path for one invocation.

    Raises:
        PipelineStageError: When the working directory is unreadable, the search
            term is invalid, the search finds nothing, or selection is aborted.
    """

    if isinstance(request, CurrentDirectory):
        return current_directory(cwd_provider)
    if isinstance(request, Segment):
        return current_directory(cwd_provider) / request.text
    if isinstance(request, ProgramSearch):
        return search_program(
            request.text,
            select_first_option=select_first_option,
            locator=locator,
            chooser=chooser,
        )
    raise TypeError(f"Unsupported location request: {request!r}")


def current_directory(cwd_provider: Callable[[], str] = os.getcwd) -> Path:
    """Return the working directory, mapping access failures to a fatal stage error."""

    try:
        return Path(cwd_provider())
    except OSError as exc:
        raise PipelineStageError(
            stage="cwd",
            detail=f"Current working directory is not accessible: {exc}",
            hint="The directory may have been deleted; `cd` to an existing directory and rerun.",
        ) from exc


def search_program(
    term: str,
    *,
    select_first_option: bool,
    locator: Locator,
    chooser: Chooser,
) -> Path:
    """Locate an executable and pick exactly one candidate path."""

    if not term.strip() or term == ".":
        raise PipelineStageError(
            stage="search-term",
            detail=f"Invalid search term `{term}`; a program name is required.",
            hint="Pass the program to look up, for example `here -w python`.",
        )

    candidates = list(locator.search(term))
    if not candidates:
        raise PipelineStageError(
            stage="search",
            detail=f"Program `{term}` was not found.",
            hint="Check the spelling, or verify the program is reachable through `PATH`.",
        )
    if len(candidates) == 1:
        return Path(candidates[0])
    if select_first_option:
        return Path(candidates[0])

    chosen = chooser(candidates)
    if chosen is None:
        raise PipelineStageError(
            stage="select",
            detail=f"Selection between {len(candidates)} paths was aborted by user.",
            hint="Rerun with `--select-first` to take the first match without prompting.",
        )
    return Path(chosen)
