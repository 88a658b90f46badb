"""Shared pytest fixtures for the full here test suite."""

from __future__ import annotations

import sys
import types

import pytest


_ENVIRONMENT_KEYS = (
    "HERE_NO_COPY",
    "HERE_NO_COLOR",
    "HERE_POSIX",
    "HERE_SELECT_FIRST",
    "HERE_ACCENT_COLOR",
    "HERE_LOCATE_COMMAND",
    "HERE_LOG_LEVEL",
    "NO_COLOR",
)


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove user-level `HERE_*` defaults so every test starts from built-in defaults."""

    for key in _ENVIRONMENT_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def clipboard_calls(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Replace the system clipboard with an in-memory call log."""

    calls: list[str] = []
    monkeypatch.setattr("here.io.clipboard.pyperclip.copy", calls.append)
    return calls


@pytest.fixture(autouse=True)
def keystroke_calls(monkeypatch: pytest.MonkeyPatch) -> list[tuple[str, str]]:
    """Replace keystroke injection with an in-memory call log."""

    calls: list[tuple[str, str]] = []

    def _fake_write(text: str) -> None:
        """Record typed text."""

        calls.append(("write", text))

    def _fake_send(hotkey: str) -> None:
        """Record sent key combinations."""

        calls.append(("send", hotkey))

    monkeypatch.setitem(
        sys.modules, "keyboard", types.SimpleNamespace(write=_fake_write, send=_fake_send)
    )
    return calls
