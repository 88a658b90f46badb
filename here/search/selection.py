"""Interactive single-choice selection between search candidates."""

from __future__ import annotations

from typing import Callable, Sequence

import typer

from ..parsing import normalize_optional_string


Chooser = Callable[[Sequence[str]], str | None]


def prompt_for_candidate(candidates: Sequence[str]) -> str | None:
    """Prompt for one candidate on stderr and return it, or `None` when skipped.

    A blank answer skips. Answers that are not a listed number re-prompt. End of
    input or an interrupt (no usable terminal, or Ctrl-C) is treated as a skip.
    """

    typer.echo("Select a path:", err=True)
    for number, candidate in enumerate(candidates, start=1):
        typer.echo(f"  {number}) {candidate}", err=True)

    while True:
        try:
            answer = typer.prompt(
                f"Choice [1-{len(candidates)}, blank to skip]",
                default="",
                show_default=False,
                err=True,
            )
        except typer.Abort:
            return None

        normalized = normalize_optional_string(answer)
        if normalized is None:
            return None
        if normalized.isdigit() and 1 <= int(normalized) <= len(candidates):
            return candidates[int(normalized) - 1]
        typer.secho(
            f"Error: `{normalized}` is not a number between 1 and {len(candidates)}.",
            fg=typer.colors.RED,
            err=True,
        )
