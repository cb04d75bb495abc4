"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .document import TextDocument
from .state import Selection
from .sync import BufferValidationError


def ensure_selection(document: TextDocument, start: int, end: int) -> Selection:
    if start < 0 or end > document.length:
        raise BufferValidationError(
            f"Selection [{start}, {end}) outside document of length {document.length}"
        )
    if start > end:
        raise BufferValidationError(f"Selection start {start} is after end {end}")
    return Selection(start, end)


def clamp_selection(document: TextDocument, start: int, end: int) -> Selection:
    length = document.length
    start = max(0, min(start, length))
    end = max(0, min(end, length))
    if start > end:
        start, end = end, start
    return Selection(start, end)


__all__ = ["clamp_selection", "ensure_selection"]
