"""Command-line interface for here.

Responsibilities:
- Expose the single `here` command and its flags.
- Convert CLI arguments and environment defaults into a validated `HereConfig`.
- Run the pipeline and hand the result to the output sinks.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from typing import Annotated

import typer

from . import __version__
from .cli_rendering import echo_sink_failures, echo_warnings, exit_with_command_error
from .config import ConfigLoader, EnvironmentDefaults, HereConfig
from .errors import PipelineStageError
from .io.dispatch import OutputDispatcher
from .pipeline import HerePipeline
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="here",
    help="Effortlessly grab and copy file locations.",
)

_COMMAND_NAME = "here"


def _version_callback(value: bool) -> None:
    """Print the package version and stop when `--version` is passed."""

    if value:
        typer.echo(f"here {__version__}")
        raise typer.Exit()


def _load_environment_defaults() -> EnvironmentDefaults:
    """Load environment defaults and map invalid values to config stage errors."""

    try:
        return ConfigLoader.from_env()
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid environment configuration: {exc}",
            hint="Fix or unset the offending `HERE_*` variable and rerun.",
        ) from exc


def _build_config(defaults: EnvironmentDefaults, **cli_values: object) -> HereConfig:
    """Build the invocation config and map invalid flag combinations to stage errors."""

    try:
        return HereConfig.from_cli_values(defaults=defaults, **cli_values)
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=str(exc),
            hint="Use `here --help` for valid flag combinations.",
        ) from exc


@app.command()
def here_command(
    path_segment_or_program_search: Annotated[
        str | None,
        typer.Argument(
            metavar="[PATH SEGMENT / PROGRAM SEARCH]",
            help=(
                "Path segment appended to the current working directory, or the "
                "program to search for with `-w/--from-where`. Defaults to the "
                "current working directory."
            ),
            show_default=False,
        ),
    ] = None,
    folder_component: Annotated[
        bool,
        typer.Option(
            "--folder",
            "-f",
            help="Get folder component of result; ignored when the result is a folder.",
        ),
    ] = False,
    where_search: Annotated[
        bool,
        typer.Option(
            "--from-where",
            "-w",
            help=(
                "Search for the program with the platform locate command (`where` or "
                "`which -a`) and use its path. Prompts when several paths are found."
            ),
        ),
    ] = False,
    change_directory: Annotated[
        bool,
        typer.Option(
            "--change-directory",
            "-d",
            help="Set current working directory to result by typing a `cd` command.",
        ),
    ] = False,
    escape_backslash: Annotated[
        bool,
        typer.Option(
            "--escape-backslash",
            "-e",
            help="Escape backslashes: turn every backslash into a pair of backslashes.",
        ),
    ] = False,
    wrap_quote: Annotated[
        bool,
        typer.Option("--wrap-quote", "-q", help="Wrap result in double quotes."),
    ] = False,
    resolve_symlink: Annotated[
        bool,
        typer.Option(
            "--resolve-symlink",
            "-r",
            help="Use the path the symlink points to; warns if the path is not a symlink.",
        ),
    ] = False,
    no_copy: Annotated[
        bool,
        typer.Option(
            "--no-copy",
            "-n",
            help="Prevent copy to clipboard; the result is still printed.",
        ),
    ] = False,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", "-c", help="Suppress color in printed result."),
    ] = False,
    posix: Annotated[
        bool | None,
        typer.Option(
            "--posix/--no-posix",
            help=(
                "Force posix style path (backslashes to forward slashes), or prevent "
                "it (forward slashes to backslashes)."
            ),
            show_default=False,
        ),
    ] = None,
    select_first_option: Annotated[
        bool,
        typer.Option(
            "--select-first",
            help="Select first option if the search finds several paths.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = None,
) -> None:
    """Copy the current working directory, a path below it, or a program location.

    The copied path is printed in color. Useful combinations: no flags copies the
    current working directory; `-wf` copies the folder of a program found on
    `PATH`; `-wfdnc` changes directory to where a program lives; `-qe` copies the
    path as a string literal.
    """

    del version
    try:
        defaults = _load_environment_defaults()
        config = _build_config(
            defaults,
            path_segment_or_program_search=path_segment_or_program_search,
            where_search=where_search,
            folder_component=folder_component,
            resolve_symlink=resolve_symlink,
            posix=posix,
            wrap_quote=wrap_quote,
            escape_backslash=escape_backslash,
            no_copy=no_copy,
            no_color=no_color,
            change_directory=change_directory,
            select_first_option=select_first_option,
        )
        run_logger = RunLogger(level=config.log_level)
        pipeline = HerePipeline(run_logger=run_logger)
        result = pipeline.run(config)
    except Exception as exc:
        exit_with_command_error(_COMMAND_NAME, exc)

    echo_warnings(result.warnings)
    dispatcher = OutputDispatcher(accent_color=config.accent_color, run_logger=run_logger)
    failures = dispatcher.dispatch(result, config.flags)
    echo_sink_failures(failures)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
