"""Selection and change tracking state for buffers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Selection:
    """Half-open ``[start, end)`` offset range; ``start == end`` is a cursor."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"selection start {self.start} is after end {self.end}")

    @classmethod
    def cursor(cls, offset: int) -> "Selection":
        return cls(offset, offset)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(slots=True)
class BufferState:
    """Mutable selection for one buffer."""

    selection: Selection = Selection(0, 0)

    def set_cursor(self, offset: int) -> None:
        self.selection = Selection.cursor(offset)


__all__ = ["BufferState", "Selection"]
