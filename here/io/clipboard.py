"""Clipboard sink backed by `pyperclip`."""

from __future__ import annotations

import pyperclip

from ..errors import PipelineStageError


def copy_to_clipboard(text: str) -> None:
    """Replace clipboard contents with `text`.

    Raises:
        PipelineStageError: If no clipboard mechanism is available.
    """

    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise PipelineStageError(
            stage="clipboard",
            detail=f"Failed to copy to clipboard: {exc}",
            hint=(
                "Install a clipboard backend (for example `xclip` or `wl-clipboard`), "
                "or pass `-n/--no-copy`."
            ),
        ) from exc
