"""Path transformation stage.

Responsibilities:
- Normalize the resolved path lexically, without touching the filesystem.
- Apply the optional filesystem steps (symlink resolution, folder reduction).
- Apply the optional text steps (separator styling, quoting, backslash escaping).

The steps run in one fixed order; each step consumes the previous step's output.
"""

from __future__ import annotations

import os
from pathlib import Path

from ..models.datatypes import PipelineWarning, TransformFlags, TransformResult


def normalize_lexical(path: Path) -> Path:
    """Collapse `.`/`..` segments and redundant separators."""

    return Path(os.path.normpath(path))


def resolve_symlink(path: Path) -> tuple[Path, PipelineWarning | None]:
    """Replace a symlink with its one-level target, warning when there is none.

    Relative link targets are interpreted against the link's directory.
    """

    if path.is_symlink():
        target = Path(os.readlink(path))
        if not target.is_absolute():
            target = path.parent / target
        return normalize_lexical(target), None
    if path.exists():
        return path, PipelineWarning(
            stage="symlink",
            message=f"Path `{path}` is not a symlink; using it unchanged.",
        )
    return path, PipelineWarning(
        stage="symlink",
        message=f"Path `{path}` does not exist; using it unchanged.",
    )


def reduce_to_folder(path: Path) -> Path:
    """Return the parent of a regular file; directories and missing paths pass through."""

    if path.is_file():
        return path.parent
    return path


def style_separators(text: str, *, posix_style: bool, no_posix_style: bool) -> str:
    """Force forward slashes, force backslashes, or leave separators untouched."""

    if posix_style:
        return text.replace("\\", "/")
    if no_posix_style:
        return text.replace("/", "\\")
    return text


def wrap_in_quotes(text: str) -> str:
    """Wrap text in one pair of double quotes."""

    return f'"{text}"'


def escape_backslashes(text: str) -> str:
    """Double every backslash."""

    return text.replace("\\", "\\\\")


def transform_path(path: Path, flags: TransformFlags) -> TransformResult:
    """Run the full transformation chain over one resolved path."""

    warnings: list[PipelineWarning] = []

    current = normalize_lexical(path)
    if flags.resolve_symlink:
        current, warning = resolve_symlink(current)
        if warning is not None:
            warnings.append(warning)
    if flags.folder_component:
        current = reduce_to_folder(current)

    display = style_separators(
        str(current),
        posix_style=flags.posix_style,
        no_posix_style=flags.no_posix_style,
    )
    if flags.wrap_quote:
        display = wrap_in_quotes(display)
    if flags.escape_backslash:
        display = escape_backslashes(display)

    return TransformResult(
        display=display,
        filesystem_path=current,
        warnings=tuple(warnings),
    )
