"""Configuration model and loaders for here.

Responsibilities:
- Define the validated invocation configuration as typed dataclasses.
- Load environment-provided defaults with deterministic normalization.
- Reject invalid flag combinations once, before the pipeline runs.

Key types:
- `EnvironmentDefaults`: defaults read from `HERE_*` environment variables.
- `HereConfig`: validated location request, flags, and presentation settings.
- `ConfigLoader`: static construction helpers for `EnvironmentDefaults`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
import shlex
from typing import Mapping

from .models.datatypes import (
    CurrentDirectory,
    LocationRequest,
    ProgramSearch,
    Segment,
    TransformFlags,
)
from .parsing import normalize_optional_string, parse_permissive_boolean, parse_rgb_color


DEFAULT_ACCENT_COLOR = (250, 128, 114)
DEFAULT_LOG_LEVEL = "CRITICAL"
_SUPPORTED_LOG_LEVELS = frozenset(
    {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
)


@dataclass(frozen=True, slots=True)
class EnvironmentDefaults:
    """Defaults resolved from the environment; explicit CLI flags take precedence.

    Attributes:
        no_copy: Default for `--no-copy`.
        no_color: Default for `--no-color`.
        posix: Default tri-state for `--posix/--no-posix` (`None` leaves separators).
        select_first: Default for `--select-first`, applied only in search mode.
        accent_color: RGB accent used for colored terminal echo.
        locate_command: Optional locate command override, without the search term.
        log_level: Minimum loguru level for run logs.
    """

    no_copy: bool = False
    no_color: bool = False
    posix: bool | None = None
    select_first: bool = False
    accent_color: tuple[int, int, int] = DEFAULT_ACCENT_COLOR
    locate_command: tuple[str, ...] | None = None
    log_level: str = DEFAULT_LOG_LEVEL


@dataclass(frozen=True, slots=True)
class HereConfig:
    """Validated configuration for one invocation.

    Attributes:
        request: Active location request variant.
        flags: Transformation and output switches.
        accent_color: RGB accent used for colored terminal echo.
        locate_command: Optional locate command override.
        log_level: Minimum loguru level for run logs.
    """

    request: LocationRequest
    flags: TransformFlags
    accent_color: tuple[int, int, int] = DEFAULT_ACCENT_COLOR
    locate_command: tuple[str, ...] | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_cli_values(
        cls,
        *,
        path_segment_or_program_search: str | None,
        where_search: bool,
        folder_component: bool = False,
        resolve_symlink: bool = False,
        posix: bool | None = None,
        wrap_quote: bool = False,
        escape_backslash: bool = False,
        no_copy: bool = False,
        no_color: bool = False,
        change_directory: bool = False,
        select_first_option: bool = False,
        defaults: EnvironmentDefaults | None = None,
    ) -> HereConfig:
        """Build a validated config from CLI values layered over environment defaults.

        Raises:
            ValueError: If the flag combination is invalid.
        """

        resolved_defaults = defaults if defaults is not None else EnvironmentDefaults()

        if select_first_option and not where_search:
            raise ValueError("`--select-first` requires `-w/--from-where`.")
        if where_search and path_segment_or_program_search is None:
            raise ValueError("`-w/--from-where` requires a program name to search for.")

        request = cls._build_request(path_segment_or_program_search, where_search)
        resolved_posix = posix if posix is not None else resolved_defaults.posix
        flags = TransformFlags(
            folder_component=folder_component,
            resolve_symlink=resolve_symlink,
            posix_style=resolved_posix is True,
            no_posix_style=resolved_posix is False,
            wrap_quote=wrap_quote,
            escape_backslash=escape_backslash,
            no_copy=no_copy or resolved_defaults.no_copy,
            no_color=no_color or resolved_defaults.no_color,
            change_directory=change_directory,
            select_first_option=where_search
            and (select_first_option or resolved_defaults.select_first),
        )
        flags.validate()

        return cls(
            request=request,
            flags=flags,
            accent_color=resolved_defaults.accent_color,
            locate_command=resolved_defaults.locate_command,
            log_level=resolved_defaults.log_level,
        )

    @staticmethod
    def _build_request(value: str | None, where_search: bool) -> LocationRequest:
        """Map the positional value and search switch to one request variant."""

        if where_search:
            return ProgramSearch(text=value or "")
        if value is None:
            return CurrentDirectory()
        return Segment(text=value)


class ConfigLoader:
    """Factory methods for creating `EnvironmentDefaults` from external sources."""

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> EnvironmentDefaults:
        """Create validated defaults from environment variables.

        Raises:
            ValueError: If any recognized variable holds an invalid value.
        """

        env_map: Mapping[str, str] = os.environ if env is None else env

        no_copy = ConfigLoader._optional_env_boolean(env_map, "HERE_NO_COPY") or False
        no_color = ConfigLoader._optional_env_boolean(env_map, "HERE_NO_COLOR")
        if no_color is None:
            no_color = ConfigLoader._optional_env_string(env_map, "NO_COLOR") is not None
        posix = ConfigLoader._optional_env_boolean(env_map, "HERE_POSIX")
        select_first = ConfigLoader._optional_env_boolean(env_map, "HERE_SELECT_FIRST") or False

        accent_color = DEFAULT_ACCENT_COLOR
        raw_accent = ConfigLoader._optional_env_string(env_map, "HERE_ACCENT_COLOR")
        if raw_accent is not None:
            accent_color = parse_rgb_color(raw_accent, "HERE_ACCENT_COLOR")

        locate_command: tuple[str, ...] | None = None
        raw_locate = ConfigLoader._optional_env_string(env_map, "HERE_LOCATE_COMMAND")
        if raw_locate is not None:
            locate_command = tuple(shlex.split(raw_locate))

        log_level = DEFAULT_LOG_LEVEL
        raw_level = ConfigLoader._optional_env_string(env_map, "HERE_LOG_LEVEL")
        if raw_level is not None:
            log_level = raw_level.upper()
            if log_level not in _SUPPORTED_LOG_LEVELS:
                supported = ", ".join(sorted(_SUPPORTED_LOG_LEVELS))
                raise ValueError(
                    f"Environment variable `HERE_LOG_LEVEL` must be one of: {supported}."
                )

        return EnvironmentDefaults(
            no_copy=no_copy,
            no_color=no_color,
            posix=posix,
            select_first=select_first,
            accent_color=accent_color,
            locate_command=locate_command,
            log_level=log_level,
        )

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        if key not in env:
            return None
        return normalize_optional_string(env.get(key))

    @staticmethod
    def _optional_env_boolean(env: Mapping[str, str], key: str) -> bool | None:
        """Read an optional boolean from environment mapping."""

        if ConfigLoader._optional_env_string(env, key) is None:
            return None
        parsed = parse_permissive_boolean(env.get(key))
        if parsed is None:
            raise ValueError(
                f"Environment variable `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed
