"""Synthetic keystroke sink for directory-change emission.

Responsibilities:
- Build the shell `cd` command for a filesystem path.
- Type the command followed by Enter through the `keyboard` package.

Keystrokes go to whatever window has input focus when they are delivered;
delivery cannot be confirmed. The `keyboard` backend is imported on first use;
importing it checks the platform input system (root on Linux, Quartz on macOS).
"""

from __future__ import annotations

from pathlib import Path
import shlex
import sys

from ..errors import PipelineStageError


def build_change_directory_command(path: Path, platform: str | None = None) -> str:
    """Return a `cd` command line that quotes `path` for the platform's shell."""

    name = sys.platform if platform is None else platform
    if name.startswith("win"):
        return f'cd "{path}"'
    return f"cd {shlex.quote(str(path))}"


def emit_change_directory(path: Path) -> None:
    """Type a `cd` command for `path` and submit it with Enter.

    Raises:
        PipelineStageError: If the keystroke backend cannot be loaded or used.
    """

    command = build_change_directory_command(path)
    try:
        import keyboard

        keyboard.write(command)
        keyboard.send("enter")
    except (ImportError, OSError, ValueError) as exc:
        raise PipelineStageError(
            stage="keystrokes",
            detail=f"Failed to emit change-directory keystrokes: {exc}",
            hint="On Linux the keystroke backend requires root; run the printed `cd` manually.",
        ) from exc
