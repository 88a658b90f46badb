"""Unit tests for environment defaults and boundary flag validation."""

from __future__ import annotations

import pytest

from here.config import (
    DEFAULT_ACCENT_COLOR,
    ConfigLoader,
    EnvironmentDefaults,
    HereConfig,
)
from here.models.datatypes import CurrentDirectory, ProgramSearch, Segment


def test_config_loader_from_env_uses_builtin_defaults_for_empty_env() -> None:
    """An empty environment should yield the built-in defaults."""

    defaults = ConfigLoader.from_env({})

    assert defaults == EnvironmentDefaults()
    assert defaults.accent_color == DEFAULT_ACCENT_COLOR
    assert defaults.log_level == "CRITICAL"


def test_config_loader_from_env_normalizes_values() -> None:
    """Recognized variables should be parsed and normalized."""

    defaults = ConfigLoader.from_env(
        {
            "HERE_NO_COPY": " yes ",
            "HERE_NO_COLOR": "off",
            "HERE_POSIX": "false",
            "HERE_SELECT_FIRST": "1",
            "HERE_ACCENT_COLOR": "#dc143c",
            "HERE_LOCATE_COMMAND": "whereis -b",
            "HERE_LOG_LEVEL": " debug ",
        }
    )

    assert defaults.no_copy is True
    assert defaults.no_color is False
    assert defaults.posix is False
    assert defaults.select_first is True
    assert defaults.accent_color == (220, 20, 60)
    assert defaults.locate_command == ("whereis", "-b")
    assert defaults.log_level == "DEBUG"


def test_config_loader_from_env_honors_no_color_convention() -> None:
    """A non-empty `NO_COLOR` should disable color unless `HERE_NO_COLOR` says otherwise."""

    assert ConfigLoader.from_env({"NO_COLOR": "1"}).no_color is True
    assert ConfigLoader.from_env({"NO_COLOR": ""}).no_color is False
    assert ConfigLoader.from_env({"NO_COLOR": "1", "HERE_NO_COLOR": "no"}).no_color is False


def test_config_loader_from_env_ignores_blank_values() -> None:
    """Blank variables should behave as if they were unset."""

    defaults = ConfigLoader.from_env({"HERE_POSIX": "  ", "HERE_ACCENT_COLOR": ""})

    assert defaults.posix is None
    assert defaults.accent_color == DEFAULT_ACCENT_COLOR


@pytest.mark.parametrize(
    ("env", "message"),
    [
        ({"HERE_NO_COPY": "maybe"}, "`HERE_NO_COPY` must be a boolean value"),
        ({"HERE_ACCENT_COLOR": "salmon"}, "`HERE_ACCENT_COLOR` must be an RGB color"),
        ({"HERE_LOG_LEVEL": "verbose"}, "`HERE_LOG_LEVEL` must be one of"),
    ],
)
def test_config_loader_from_env_rejects_invalid_values(
    env: dict[str, str], message: str
) -> None:
    """Invalid variable values should raise with an actionable message."""

    with pytest.raises(ValueError, match=message):
        ConfigLoader.from_env(env)


def test_here_config_maps_positional_value_to_request_variants() -> None:
    """The positional value and search switch should select exactly one request."""

    assert HereConfig.from_cli_values(
        path_segment_or_program_search=None, where_search=False
    ).request == CurrentDirectory()
    assert HereConfig.from_cli_values(
        path_segment_or_program_search="src", where_search=False
    ).request == Segment(text="src")
    assert HereConfig.from_cli_values(
        path_segment_or_program_search="python", where_search=True
    ).request == ProgramSearch(text="python")


def test_here_config_rejects_select_first_without_search() -> None:
    """`--select-first` is only meaningful in search mode."""

    with pytest.raises(ValueError, match="`--select-first` requires `-w/--from-where`"):
        HereConfig.from_cli_values(
            path_segment_or_program_search="python",
            where_search=False,
            select_first_option=True,
        )


def test_here_config_rejects_search_without_term() -> None:
    """`--from-where` needs a positional program name."""

    with pytest.raises(ValueError, match="requires a program name"):
        HereConfig.from_cli_values(path_segment_or_program_search=None, where_search=True)


def test_here_config_posix_tri_state_maps_to_exclusive_flags() -> None:
    """`--posix`, `--no-posix`, and neither should map to exclusive flag pairs."""

    forced = HereConfig.from_cli_values(
        path_segment_or_program_search=None, where_search=False, posix=True
    ).flags
    prevented = HereConfig.from_cli_values(
        path_segment_or_program_search=None, where_search=False, posix=False
    ).flags
    untouched = HereConfig.from_cli_values(
        path_segment_or_program_search=None, where_search=False
    ).flags

    assert (forced.posix_style, forced.no_posix_style) == (True, False)
    assert (prevented.posix_style, prevented.no_posix_style) == (False, True)
    assert (untouched.posix_style, untouched.no_posix_style) == (False, False)


def test_here_config_layers_cli_values_over_environment_defaults() -> None:
    """Environment defaults should apply only where the CLI left a value unset."""

    defaults = EnvironmentDefaults(
        no_copy=True,
        no_color=True,
        posix=True,
        select_first=True,
        accent_color=(1, 2, 3),
        locate_command=("which",),
    )

    segment_config = HereConfig.from_cli_values(
        path_segment_or_program_search="docs",
        where_search=False,
        posix=False,
        defaults=defaults,
    )
    search_config = HereConfig.from_cli_values(
        path_segment_or_program_search="python",
        where_search=True,
        defaults=defaults,
    )

    assert segment_config.flags.no_copy is True
    assert segment_config.flags.no_color is True
    assert segment_config.flags.no_posix_style is True
    assert segment_config.flags.select_first_option is False
    assert segment_config.accent_color == (1, 2, 3)
    assert search_config.flags.posix_style is True
    assert search_config.flags.select_first_option is True
    assert search_config.locate_command == ("which",)
