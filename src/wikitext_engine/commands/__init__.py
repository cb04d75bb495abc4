"""Declarative toolbar commands and keyboard shortcuts."""

from .defaults import DEFAULT_COMMANDS, DEFAULT_SHORTCUTS, load_default_commands
from .models import CommandRef, Shortcut, normalize_key
from .registry import CommandRegistry, RegistryStats, ShortcutConflictError

__all__ = [
    "CommandRef",
    "CommandRegistry",
    "DEFAULT_COMMANDS",
    "DEFAULT_SHORTCUTS",
    "RegistryStats",
    "Shortcut",
    "ShortcutConflictError",
    "load_default_commands",
    "normalize_key",
]
