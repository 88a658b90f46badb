"""Executable search through the platform's locate facility.

Responsibilities:
- Define the `Locator` capability used by the resolver.
- Run the platform locate command synchronously and parse its output lines.

Key types:
- `Locator`: protocol with `search(term) -> Sequence[str]`.
- `SubprocessLocator`: child-process implementation (`where` or `which -a`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
import subprocess
import sys
from typing import Protocol, Sequence

from ..errors import PipelineStageError
from ..parsing import normalize_optional_string


class Locator(Protocol):
    """Capability interface for executable search."""

    def search(self, term: str) -> Sequence[str]:
        """Return zero or more candidate path strings for a search term."""


def default_locate_command(platform: str | None = None) -> tuple[str, ...]:
    """Return the locate command prefix for a platform, without the search term."""

    name = sys.platform if platform is None else platform
    if name.startswith("win"):
        return ("where",)
    return ("which", "-a")


def parse_candidates(output: str) -> list[str]:
    """Split locate output into candidate lines.

    Carriage returns and surrounding whitespace are removed and blank lines
    dropped; the remaining lines are kept in output order.
    """

    candidates: list[str] = []
    for line in output.replace("\r", "").split("\n"):
        candidate = line.strip()
        if candidate:
            candidates.append(candidate)
    return candidates


@dataclass(frozen=True, slots=True)
class SubprocessLocator:
    """Locate executables by running the platform search utility."""

    command: tuple[str, ...] = field(default_factory=default_locate_command)

    def search(self, term: str) -> list[str]:
        """Run the locate command for `term` and return its candidate lines.

        Exit status 1 is how both `where` and `which` report "nothing found", which
        yields an empty candidate list. Higher statuses with no output are errors.
        """

        command = [*self.command, term]
        try:
            completed = subprocess.run(
                command,
                check=False,
                capture_output=True,
                text=True,
                errors="replace",
            )
        except FileNotFoundError as exc:
            raise PipelineStageError(
                stage="search",
                detail=f"Locate tool `{self.command[0]}` is not available on PATH.",
                hint="Install it or point `HERE_LOCATE_COMMAND` at an equivalent tool.",
            ) from exc
        except OSError as exc:
            raise PipelineStageError(
                stage="search",
                detail=f"Failed to run locate tool `{self.command[0]}`: {exc}",
            ) from exc

        if completed.returncode > 1 and not completed.stdout:
            stderr = normalize_optional_string(completed.stderr) or "no stderr output"
            raise PipelineStageError(
                stage="search",
                detail=(
                    f"Locate tool `{self.command[0]}` failed with exit status "
                    f"{completed.returncode}: {stderr}"
                ),
            )
        return parse_candidates(completed.stdout or "")
