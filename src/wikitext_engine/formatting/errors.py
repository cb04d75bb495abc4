"""Recoverable failures raised by formatting primitives.

The engine catches both kinds: ``ExpansionNotFound`` sends a toggle back to
add mode, ``BoundaryUnavailable`` aborts the gesture before any mutation.
"""

from __future__ import annotations


class FormattingError(RuntimeError):
    """Base class for formatting failures that never reach the host."""


class ExpansionNotFound(FormattingError):
    """No delimiter pair surrounds the selection on its line."""

    def __init__(self, start_token: str, end_token: str) -> None:
        super().__init__(f"No {start_token!r}...{end_token!r} pair around selection")
        self.start_token = start_token
        self.end_token = end_token


class BoundaryUnavailable(FormattingError):
    """A shifted position fell outside the document."""

    def __init__(self, offset: int, delta: int) -> None:
        super().__init__(f"Cannot shift offset {offset} by {delta}")
        self.offset = offset
        self.delta = delta


__all__ = ["FormattingError", "ExpansionNotFound", "BoundaryUnavailable"]
