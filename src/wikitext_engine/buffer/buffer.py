"""High-level buffer façade combining the document and its selection."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional, Tuple

from wikitext_engine.runtime import telemetry

from .document import TextDocument
from .state import BufferState, Selection
from .sync import BufferMirror
from .validation import ensure_selection


@dataclass(slots=True)
class BufferView:
    version: int
    text: str
    selection: Selection


@dataclass(slots=True)
class BufferDelta:
    version: int
    text: str
    selection: Selection
    label: str


class Buffer:
    """Host-owned text plus selection; the engine borrows it per gesture."""

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[TextDocument] = None,
        state: Optional[BufferState] = None,
    ) -> None:
        self.name = name
        self.document = document or TextDocument()
        self.state = state or BufferState()

    @classmethod
    def from_text(
        cls, text: str, *, name: str = "default", selection: Optional[Selection] = None
    ) -> "Buffer":
        buffer = cls(name=name, document=TextDocument.from_text(text))
        if selection is not None:
            buffer.select(selection.start, selection.end)
        return buffer

    @property
    def text(self) -> str:
        return self.document.text

    @property
    def selection(self) -> Selection:
        return self.state.selection

    @property
    def version(self) -> int:
        return self.document.version

    def snapshot(self) -> BufferView:
        return BufferView(
            version=self.document.version,
            text=self.document.text,
            selection=self.state.selection,
        )

    def mirror(self, *, active: tuple[str, ...] = ()) -> BufferMirror:
        return BufferMirror(
            text=self.document.text,
            selection=self.state.selection,
            version=self.document.version,
            active=tuple(active),
        )

    def select(self, start: int, end: int) -> Selection:
        selection = ensure_selection(self.document, start, end)
        self.state.selection = selection
        return selection

    def replace_range(
        self,
        start: int,
        end: int,
        text: str,
        *,
        label: str,
        selection: Optional[Selection] = None,
    ) -> BufferDelta:
        """Replace ``[start, end)`` with ``text``.

        The selection is set to ``selection`` when given, otherwise it
        collapses to a cursor after the inserted text.
        """

        ensure_selection(self.document, start, end)
        with Transaction(self, label) as tx:
            self.document = self.document.replace(start, end, text)
            if selection is None:
                self.state.set_cursor(start + len(text))
            else:
                self.state.selection = ensure_selection(
                    self.document, selection.start, selection.end
                )
            tx.commit(removed=end - start, inserted=len(text))

        return BufferDelta(
            version=self.document.version,
            text=self.document.text,
            selection=self.state.selection,
            label=label,
        )

    def insert_text(self, text: str, *, at: Optional[int] = None) -> BufferDelta:
        position = self.state.selection.start if at is None else at
        return self.replace_range(position, position, text, label="insert_text")

    def text_in(self, start: int, end: int) -> str:
        if start > end:
            start, end = end, start
        return self.document.text_in(start, end)

    def position_from(self, offset: int, delta: int) -> Optional[int]:
        return self.document.position_from(offset, delta)

    def line_range(self, selection: Optional[Selection] = None) -> Tuple[int, int]:
        target = selection or self.state.selection
        return self.document.line_range(target.start, target.end)

    def line_content(self, selection: Optional[Selection] = None) -> Selection:
        """Line range of ``selection`` without its trailing line break."""

        start, end = self.line_range(selection)
        if end > start and self.document.text[end - 1] == "\n":
            end -= 1
        return Selection(start, end)


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one buffer edit in a telemetry span."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None
        self._handle: Optional[telemetry.SpanHandle] = None
        self._version_before = buffer.document.version

    def __enter__(self) -> "Transaction":
        self._version_before = self.buffer.document.version
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name},
        )
        self._handle = self._span_cm.__enter__()
        return self

    def commit(self, *, removed: int, inserted: int) -> None:
        if self._handle is None:
            return
        self._handle.add_metadata("removed", removed)
        self._handle.add_metadata("inserted", inserted)
        self._handle.add_metadata("version", self.buffer.document.version)

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Buffer", "BufferDelta", "BufferView", "Transaction"]
