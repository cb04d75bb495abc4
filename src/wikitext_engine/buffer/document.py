"""Text storage for wikitext buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class TextDocument:
    """Immutable flat-string document; every edit yields a new version.

    Offsets count Python code points. Hosts that measure text in UTF-16
    units must convert before handing selections to the engine.
    """

    text: str = ""
    version: int = 0

    @classmethod
    def from_text(cls, text: str) -> "TextDocument":
        return cls(text=text, version=0)

    @property
    def length(self) -> int:
        return len(self.text)

    def replace(self, start: int, end: int, new_text: str) -> "TextDocument":
        """Return a document with ``[start:end]`` replaced by ``new_text``."""

        updated = self.text[:start] + new_text + self.text[end:]
        return TextDocument(text=updated, version=self.version + 1)

    def text_in(self, start: int, end: int) -> str:
        return self.text[start:end]

    def position_from(self, offset: int, delta: int) -> Optional[int]:
        """Shift ``offset`` by ``delta``; ``None`` when it leaves the document."""

        target = offset + delta
        if target < 0 or target > len(self.text):
            return None
        return target

    def line_start(self, offset: int) -> int:
        return self.text.rfind("\n", 0, offset) + 1

    def line_range(self, start: int, end: int) -> Tuple[int, int]:
        """Range of the full lines touched by ``[start, end)``, terminator included."""

        first = self.line_start(start)
        probe = end - 1 if end > start else end
        newline = self.text.find("\n", probe)
        last = len(self.text) if newline == -1 else newline + 1
        return first, last


__all__ = ["TextDocument"]
