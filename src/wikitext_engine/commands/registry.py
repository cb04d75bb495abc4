"""Registry storing toolbar commands and keyboard shortcuts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from wikitext_engine.runtime.telemetry import span

from .models import CommandRef, Shortcut, normalize_key


@dataclass(slots=True)
class RegistryStats:
    command_count: int
    shortcut_count: int


class ShortcutConflictError(RuntimeError):
    """Raised when a key is already bound to a different command."""

    def __init__(self, shortcut: Shortcut, existing: Shortcut) -> None:
        super().__init__(
            f"Key '{shortcut.key}' for '{shortcut.command_id}' is already bound "
            f"to '{existing.command_id}'"
        )
        self.shortcut = shortcut
        self.existing = existing


class CommandRegistry:
    def __init__(self, *, logger_name: str | None = None) -> None:
        self._commands: Dict[str, CommandRef] = {}
        self._shortcuts: Dict[str, Shortcut] = {}
        self._logger_name = logger_name

    def get_command(self, command_id: str) -> CommandRef:
        try:
            return self._commands[command_id]
        except KeyError as exc:
            raise KeyError(f"Command '{command_id}' is not registered") from exc

    def register_command(self, command: CommandRef, *, replace: bool = False) -> CommandRef:
        with span(
            "commands::register_command",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command_id": command.id},
        ):
            if not replace and command.id in self._commands:
                raise ValueError(f"Command '{command.id}' already registered")
            self._commands[command.id] = command
            return command

    def register_shortcut(self, shortcut: Shortcut, *, replace: bool = False) -> Shortcut:
        with span(
            "commands::register_shortcut",
            logger_name=self._logger_name,
            component="commands",
            metadata={"key": shortcut.key, "command_id": shortcut.command_id},
        ) as handle:
            if shortcut.command_id not in self._commands:
                handle.add_metadata("missing_command", shortcut.command_id)
                raise KeyError(
                    f"Shortcut '{shortcut.key}' references unknown command "
                    f"'{shortcut.command_id}'"
                )
            existing = self._shortcuts.get(shortcut.key)
            if existing and existing.command_id != shortcut.command_id and not replace:
                handle.add_metadata("conflict", existing.command_id)
                raise ShortcutConflictError(shortcut, existing)
            self._shortcuts[shortcut.key] = shortcut
            return shortcut

    def unregister_shortcut(self, key: str) -> Optional[Shortcut]:
        return self._shortcuts.pop(normalize_key(key), None)

    def resolve_key(self, key: str, modifiers: tuple[str, ...] = ()) -> Optional[CommandRef]:
        shortcut = self._shortcuts.get(normalize_key(key, modifiers))
        if shortcut is None:
            return None
        return self._commands.get(shortcut.command_id)

    def shortcuts_for(self, command_id: str) -> tuple[str, ...]:
        return tuple(
            key for key, item in self._shortcuts.items() if item.command_id == command_id
        )

    def stats(self) -> RegistryStats:
        return RegistryStats(
            command_count=len(self._commands),
            shortcut_count=len(self._shortcuts),
        )


__all__ = ["CommandRegistry", "RegistryStats", "ShortcutConflictError"]
