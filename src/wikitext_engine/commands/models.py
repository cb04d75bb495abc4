"""Dataclasses describing toolbar commands and their keyboard shortcuts."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from wikitext_engine.formatting.models import FormattingAction, FormattingRequest


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


def normalize_key(key: str, modifiers: Iterable[str] = ()) -> str:
    """Canonical ``mod+mod+key`` token, e.g. ``"Shift+Ctrl+B"`` -> ``"ctrl+shift+b"``."""

    parts = [part for part in key.split("+") if part.strip()]
    if not parts:
        raise ValueError("key cannot be empty")
    *inline_mods, base = parts
    mods = _normalize_modifiers([*inline_mods, *modifiers])
    base = base.strip().lower()
    return "+".join((*mods, base)) if mods else base


@dataclass(frozen=True, slots=True)
class CommandRef:
    """A toolbar command resolved to one formatting request."""

    id: str
    action: FormattingAction
    depth: Optional[int] = None
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("CommandRef id cannot be empty")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        FormattingRequest(action=self.action, depth=self.depth)

    @property
    def request(self) -> FormattingRequest:
        return FormattingRequest(action=self.action, depth=self.depth)


@dataclass(frozen=True, slots=True)
class Shortcut:
    """Associates a normalized key token with a command id."""

    key: str
    command_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.command_id:
            raise ValueError("shortcut command_id cannot be empty")
        object.__setattr__(self, "key", normalize_key(self.key))


__all__ = ["CommandRef", "Shortcut", "normalize_key"]
