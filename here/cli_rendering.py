"""CLI diagnostics rendering helpers.

This module centralizes user-facing stderr output for fatal command errors,
non-fatal pipeline warnings, and sink failures.
"""

from __future__ import annotations

from typing import NoReturn, Sequence

import typer

from .errors import PipelineStageError
from .models.datatypes import PipelineWarning, SinkFailure


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PipelineStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_warnings(warnings: Sequence[PipelineWarning]) -> None:
    """Print non-fatal pipeline warnings."""

    for warning in warnings:
        typer.secho(f"Warning: {warning.message}", fg=typer.colors.YELLOW, err=True)


def echo_sink_failures(failures: Sequence[SinkFailure]) -> None:
    """Print sink failures and their hints; these never change the exit code."""

    for failure in failures:
        typer.secho(
            f"{failure.sink} output failed: {failure.detail}",
            fg=typer.colors.YELLOW,
            err=True,
        )
        if failure.hint:
            typer.secho(f"Hint: {failure.hint}", fg=typer.colors.YELLOW, err=True)
