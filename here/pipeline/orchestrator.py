"""Pipeline orchestrator for here.

Responsibilities:
- Run the resolve and transform stages in order for one invocation.
- Inject the locate facility, chooser, and working-directory provider so that
  each collaborator can be swapped in tests.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

from ..config import HereConfig
from ..models.datatypes import LocationRequest, TransformFlags, TransformResult
from ..search.locator import Locator, SubprocessLocator
from ..search.selection import Chooser, prompt_for_candidate
from ..telemetry.logger import RunLogger
from .resolver import resolve_location
from .telemetry import PipelineTelemetryMixin
from .transformer import transform_path


class HerePipeline(PipelineTelemetryMixin):
    """Resolve a location and transform it into its display form."""

    def __init__(
        self,
        *,
        locator: Locator | None = None,
        chooser: Chooser = prompt_for_candidate,
        cwd_provider: Callable[[], str] = os.getcwd,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Initialize the pipeline with optional collaborator overrides."""

        self._locator = locator
        self._chooser = chooser
        self._cwd_provider = cwd_provider
        self._run_logger = run_logger

    def run(self, config: HereConfig) -> TransformResult:
        """Resolve and transform the location described by `config`."""

        locator = self._locator
        if locator is None:
            locator = (
                SubprocessLocator(command=config.locate_command)
                if config.locate_command
                else SubprocessLocator()
            )
        resolved = self.resolve(
            config.request,
            select_first_option=config.flags.select_first_option,
            locator=locator,
        )
        return self.transform(resolved, config.flags)

    def resolve(
        self,
        request: LocationRequest,
        *,
        select_first_option: bool = False,
        locator: Locator | None = None,
    ) -> Path:
        """Run the resolve stage for one request."""

        active_locator = locator or self._locator or SubprocessLocator()
        return self._run_stage(
            "resolve",
            lambda: resolve_location(
                request,
                select_first_option=select_first_option,
                locator=active_locator,
                chooser=self._chooser,
                cwd_provider=self._cwd_provider,
            ),
        )

    def transform(self, path: Path, flags: TransformFlags) -> TransformResult:
        """Run the transform stage and log any warnings it produced."""

        result = self._run_stage("transform", lambda: transform_path(path, flags))
        if self._run_logger is not None:
            for warning in result.warnings:
                self._run_logger.log_warning(warning.stage, warning.message)
            self._run_logger.log_detail("transform", display=result.display)
        return result
