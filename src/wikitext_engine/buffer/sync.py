"""Adapter boundary types for syncing buffers with host widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .state import Selection


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot describing the current buffer state."""

    text: str
    selection: Selection
    version: int = 0
    active: tuple[str, ...] = field(default_factory=tuple)


class BufferValidationError(RuntimeError):
    """Raised when a host provides an out-of-bounds selection."""

    def __init__(self, message: str, *, selection: Optional[Selection] = None) -> None:
        super().__init__(message)
        self.selection = selection


__all__ = ["BufferMirror", "BufferValidationError"]
