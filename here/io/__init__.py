"""Output sinks for resolved paths."""

from .clipboard import copy_to_clipboard
from .dispatch import OutputDispatcher
from .keystrokes import build_change_directory_command, emit_change_directory

__all__ = [
    "OutputDispatcher",
    "build_change_directory_command",
    "copy_to_clipboard",
    "emit_change_directory",
]
