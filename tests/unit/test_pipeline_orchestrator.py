"""Unit tests for the resolve-then-transform orchestrator."""

from __future__ import annotations

import io
from pathlib import Path
import sys
from typing import Sequence

import pytest

from here.config import HereConfig
from here.errors import PipelineStageError
from here.pipeline import HerePipeline
from here.telemetry.logger import RunLogger


class FixedLocator:
    """Locator returning a fixed candidate list."""

    def __init__(self, candidates: Sequence[str]) -> None:
        """Initialize with candidates returned for every search."""

        self._candidates = list(candidates)

    def search(self, term: str) -> list[str]:
        """Return the configured candidates."""

        return list(self._candidates)


def _never_choose(candidates: Sequence[str]) -> str | None:
    """Fail the test if an interactive prompt is requested."""

    raise AssertionError(f"unexpected prompt for {list(candidates)}")


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX path semantics")
def test_run_resolves_segment_and_transforms_it(tmp_path: Path) -> None:
    """A segment request should be joined, normalized, and styled."""

    (tmp_path / "pkg").mkdir()
    script = tmp_path / "pkg" / "tool.py"
    script.write_text("", encoding="utf-8")
    config = HereConfig.from_cli_values(
        path_segment_or_program_search="./pkg/../pkg/tool.py",
        where_search=False,
        folder_component=True,
        posix=False,
    )
    pipeline = HerePipeline(chooser=_never_choose, cwd_provider=lambda: str(tmp_path))

    result = pipeline.run(config)

    assert result.filesystem_path == tmp_path / "pkg"
    assert result.display == str(tmp_path / "pkg").replace("/", "\\")


def test_run_search_with_select_first_skips_prompt() -> None:
    """Search mode with select-first should take the first candidate."""

    config = HereConfig.from_cli_values(
        path_segment_or_program_search="x",
        where_search=True,
        select_first_option=True,
        posix=True,
    )
    pipeline = HerePipeline(
        locator=FixedLocator(["C:\\a\\x.exe", "C:\\b\\x.exe"]),
        chooser=_never_choose,
    )

    result = pipeline.run(config)

    assert result.display == "C:/a/x.exe"


def test_run_logs_stage_events_and_failures() -> None:
    """Stage telemetry should record start, complete, and failure events."""

    sink = io.StringIO()
    pipeline = HerePipeline(
        locator=FixedLocator([]),
        chooser=_never_choose,
        run_logger=RunLogger(sink=sink, level="INFO"),
    )
    config = HereConfig.from_cli_values(path_segment_or_program_search="nope", where_search=True)

    with pytest.raises(PipelineStageError):
        pipeline.run(config)

    assert sink.getvalue().splitlines() == [
        "[phase] level=INFO stage=resolve event=start",
        "[phase] level=ERROR stage=resolve event=failure error_type=PipelineStageError",
    ]
