"""Output dispatch to clipboard, terminal, and keystroke sinks.

Responsibilities:
- Run the sinks in the fixed order clipboard, echo, keystrokes.
- Collect sink failures without letting one sink abort the others.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import typer

from ..config import DEFAULT_ACCENT_COLOR
from ..errors import PipelineStageError
from ..models.datatypes import SinkFailure, TransformFlags, TransformResult
from ..telemetry.logger import RunLogger
from .clipboard import copy_to_clipboard
from .keystrokes import emit_change_directory


class OutputDispatcher:
    """Deliver one transform result to every enabled sink."""

    def __init__(
        self,
        *,
        clipboard_writer: Callable[[str], None] = copy_to_clipboard,
        keystroke_emitter: Callable[[Path], None] = emit_change_directory,
        accent_color: tuple[int, int, int] = DEFAULT_ACCENT_COLOR,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Initialize sinks and presentation settings."""

        self._clipboard_writer = clipboard_writer
        self._keystroke_emitter = keystroke_emitter
        self._accent_color = accent_color
        self._run_logger = run_logger

    def dispatch(self, result: TransformResult, flags: TransformFlags) -> list[SinkFailure]:
        """Run enabled sinks and return failures of the ones that could not deliver."""

        failures: list[SinkFailure] = []

        if not flags.no_copy:
            self._run_sink(
                "clipboard", lambda: self._clipboard_writer(result.display), failures
            )

        self.echo(result.display, no_color=flags.no_color)

        if flags.change_directory:
            self._run_sink(
                "keystrokes",
                lambda: self._keystroke_emitter(result.filesystem_path),
                failures,
            )

        return failures

    def echo(self, display: str, *, no_color: bool) -> None:
        """Print the display string, in the accent color unless disabled."""

        if no_color:
            typer.echo(display, color=False)
            return
        typer.secho(display, fg=self._accent_color)

    def _run_sink(
        self,
        sink: str,
        action: Callable[[], None],
        failures: list[SinkFailure],
    ) -> None:
        """Run one sink and record its failure instead of raising."""

        try:
            action()
        except PipelineStageError as exc:
            failures.append(SinkFailure(sink=sink, detail=exc.detail, hint=exc.hint))
            if self._run_logger is not None:
                self._run_logger.log_stage_failure(sink, type(exc).__name__)
            return
        if self._run_logger is not None:
            self._run_logger.log_stage_complete(sink)
