"""Core datatypes shared across here modules.

Responsibilities:
- Represent the caller's location intent and the transformation switches.
- Carry immutable records between the resolver, transformer, and output sinks.

Key types:
- `CurrentDirectory`, `Segment`, `ProgramSearch` (the `LocationRequest` variants),
  `TransformFlags`, `TransformResult`, `PipelineWarning`, and `SinkFailure`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class CurrentDirectory:
    """Request for the process's current working directory."""


@dataclass(frozen=True, slots=True)
class Segment:
    """Request for a path segment joined onto the current working directory.

    Attributes:
        text: Raw segment text, joined without any filesystem access.
    """

    text: str


@dataclass(frozen=True, slots=True)
class ProgramSearch:
    """Request for the install location of an executable.

    Attributes:
        text: Search term handed to the locate facility.
    """

    text: str


LocationRequest = CurrentDirectory | Segment | ProgramSearch


@dataclass(frozen=True, slots=True)
class TransformFlags:
    """Boolean switches controlling transformation and output dispatch.

    Attributes:
        folder_component: Reduce a regular file to its parent directory.
        resolve_symlink: Replace a symlink with its one-level link target.
        posix_style: Convert every backslash to a forward slash.
        no_posix_style: Convert every forward slash to a backslash.
        wrap_quote: Wrap the display text in double quotes.
        escape_backslash: Double every backslash in the display text.
        no_copy: Skip the clipboard sink.
        no_color: Echo the display text without the accent color.
        change_directory: Emit a `cd` command as synthetic keystrokes.
        select_first_option: Take the first candidate of a multi-result search.
    """

    folder_component: bool = False
    resolve_symlink: bool = False
    posix_style: bool = False
    no_posix_style: bool = False
    wrap_quote: bool = False
    escape_backslash: bool = False
    no_copy: bool = False
    no_color: bool = False
    change_directory: bool = False
    select_first_option: bool = False

    def validate(self) -> None:
        """Reject flag combinations that cannot be honored together."""

        if self.posix_style and self.no_posix_style:
            raise ValueError("`posix_style` and `no_posix_style` are mutually exclusive.")


@dataclass(frozen=True, slots=True)
class PipelineWarning:
    """Non-fatal condition reported while the pipeline keeps running.

    Attributes:
        stage: Pipeline stage that produced the warning.
        message: Human-readable warning text.
    """

    stage: str
    message: str


@dataclass(frozen=True, slots=True)
class TransformResult:
    """Outcome of the transformation chain for one invocation.

    Attributes:
        display: Final text delivered to the clipboard and terminal.
        filesystem_path: Normalized path after symlink and folder steps, used for
            directory-change emission.
        warnings: Non-fatal warnings collected along the chain.
    """

    display: str
    filesystem_path: Path
    warnings: tuple[PipelineWarning, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class SinkFailure:
    """Reported failure of one output sink.

    Attributes:
        sink: Sink identifier (`clipboard` or `keystrokes`).
        detail: Failure description.
        hint: Optional remediation hint.
    """

    sink: str
    detail: str
    hint: str | None = None
