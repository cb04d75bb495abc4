"""Editing session tying a host buffer to the tagger, engine and event bus."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from wikitext_engine.attributes import AttributeMap, WikitextTagger
from wikitext_engine.buffer import Buffer, Selection, clamp_selection
from wikitext_engine.commands import CommandRegistry, load_default_commands
from wikitext_engine.config import EngineSettings
from wikitext_engine.formatting import (
    FormattingAction,
    FormattingEngine,
    FormattingRequest,
    FormattingResult,
    ToolbarState,
    compute_toolbar_state,
)
from wikitext_engine.runtime import telemetry


class EditorBus:
    """Minimal event bus the session uses to notify adapters."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class EditorSession:
    """Owns the buffer for one editor and serializes formatting gestures.

    Emits ``wikitext.changed`` (text edits), ``selection.changed`` (with the
    refreshed ``ToolbarState``) and ``formatting.applied`` (engine results).
    """

    def __init__(
        self,
        buffer: Optional[Buffer] = None,
        *,
        settings: Optional[EngineSettings] = None,
        tagger: Optional[WikitextTagger] = None,
        engine: Optional[FormattingEngine] = None,
        commands: Optional[CommandRegistry] = None,
        bus: Optional[EditorBus] = None,
    ) -> None:
        self.settings = settings or EngineSettings()
        self.buffer = buffer or Buffer()
        self.tagger = tagger or WikitextTagger()
        self.engine = engine or FormattingEngine(settings=self.settings)
        self.bus = bus or EditorBus()
        if commands is None:
            commands = CommandRegistry(logger_name="wikitext_engine.commands")
            load_default_commands(commands)
        self.commands = commands
        self._attributes: Optional[AttributeMap] = None
        self._tagged_version = -1

    @classmethod
    def from_text(cls, text: str, **kwargs) -> "EditorSession":
        return cls(Buffer.from_text(text), **kwargs)

    @property
    def attributes(self) -> AttributeMap:
        """Tagger output for the current buffer version, recomputed lazily."""

        if self._attributes is None or self._tagged_version != self.buffer.version:
            self._attributes = self.tagger.tag(self.buffer.text)
            self._tagged_version = self.buffer.version
        return self._attributes

    def toolbar_state(self) -> ToolbarState:
        return compute_toolbar_state(
            self.attributes,
            len(self.buffer.text),
            self.buffer.selection,
            probe_neighbors=self.settings.probe_neighbors,
            line=self.buffer.line_content(),
        )

    def load_text(self, text: str, *, selection: Optional[Selection] = None) -> None:
        self.buffer.replace_range(
            0,
            len(self.buffer.text),
            text,
            label="load_text",
            selection=selection or Selection.cursor(0),
        )
        self.bus.emit("wikitext.changed", self.buffer.snapshot())
        self._notify_selection()

    def select(self, start: int, end: int) -> Selection:
        """Move the selection; out-of-range input is clamped unless strict."""

        if self.settings.strict_selection:
            selection = self.buffer.select(start, end)
        else:
            clamped = clamp_selection(self.buffer.document, start, end)
            selection = self.buffer.select(clamped.start, clamped.end)
        self._notify_selection()
        return selection

    def replace_text(self, text: str, selection: Selection) -> bool:
        """Adopt text edited in the host widget; returns False when unchanged."""

        if text == self.buffer.text:
            if selection != self.buffer.selection:
                self.select(selection.start, selection.end)
            return False
        self.buffer.replace_range(
            0, len(self.buffer.text), text, label="host_edit", selection=selection
        )
        self.bus.emit("wikitext.changed", self.buffer.snapshot())
        self._notify_selection()
        return True

    def apply(
        self, action: FormattingAction, *, depth: Optional[int] = None
    ) -> FormattingResult:
        return self.apply_request(FormattingRequest(action=action, depth=depth))

    def apply_request(self, request: FormattingRequest) -> FormattingResult:
        result = self.engine.apply(self.buffer, self.attributes, request)
        self.bus.emit("formatting.applied", result)
        if result.changed:
            self.bus.emit("wikitext.changed", self.buffer.snapshot())
        self._notify_selection()
        return result

    def dispatch(self, command_id: str) -> FormattingResult:
        command = self.commands.get_command(command_id)
        telemetry.record_event(
            "command.dispatch", level="debug", data={"command_id": command_id}
        )
        return self.apply_request(command.request)

    def _notify_selection(self) -> None:
        self.bus.emit("selection.changed", self.toolbar_state())


__all__ = ["EditorBus", "EditorSession"]
