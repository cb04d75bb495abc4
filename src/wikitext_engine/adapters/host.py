"""UI-agnostic adapter that wires an EditorSession into host widget callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from wikitext_engine.buffer import BufferMirror, Selection
from wikitext_engine.formatting import FormattingResult, ToolbarState
from wikitext_engine.session import EditorSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class EditorUIHooks:
    """Callbacks invoked by the adapter to update host widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_toolbar: Callable[[ToolbarState], None] = _noop
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class EditorHostAdapter:
    """Bridges host gestures to the session and session events back to the host."""

    def __init__(self, session: EditorSession, hooks: EditorUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_buffer()
        self.hooks.update_toolbar(self.session.toolbar_state())

    def pull_buffer(self) -> BufferMirror:
        return self.session.buffer.mirror(active=self.session.toolbar_state().names())

    def push_host_edit(self, mirror: BufferMirror) -> None:
        self._log_state("edit ->", length=len(mirror.text), selection=mirror.selection)
        self.session.replace_text(mirror.text, mirror.selection)

    def handle_selection(self, start: int, end: int) -> Selection:
        return self.session.select(start, end)

    def handle_command(self, command_id: str) -> FormattingResult:
        self._log_state("command ->", command=command_id)
        result = self.session.dispatch(command_id)
        self._after_result(result)
        return result

    def handle_key(
        self, key: str, *, modifiers: Iterable[str] = ()
    ) -> Optional[FormattingResult]:
        """Run the command bound to ``key``; ``None`` when nothing is bound."""

        command = self.session.commands.resolve_key(key, tuple(modifiers))
        if command is None:
            return None
        return self.handle_command(command.id)

    def _after_result(self, result: FormattingResult) -> None:
        status = f"{result.request.action.value}:{result.status}"
        if result.message:
            status = f"{status} ({result.message})"
        self.hooks.update_status(status)
        self._log_state(
            "result <-",
            status=result.status,
            changed=result.changed,
            message=result.message,
        )

    def _subscribe_events(self) -> None:
        bus = self.session.bus
        for event in ("wikitext.changed", "selection.changed", "formatting.applied"):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name)
        self.hooks.handle_event(name, payload)
        if name == "wikitext.changed":
            self._refresh_buffer()
        elif name == "selection.changed" and isinstance(payload, ToolbarState):
            self.hooks.update_toolbar(payload)

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.session.buffer.mirror())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.session.buffer
        return {
            "buffer": buffer.name,
            "version": buffer.version,
            "selection": (buffer.selection.start, buffer.selection.end),
        }


__all__ = ["EditorHostAdapter", "EditorUIHooks"]
