from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from wikitext_engine.adapters import EditorHostAdapter, EditorUIHooks
from wikitext_engine.buffer import BufferMirror, Selection
from wikitext_engine.formatting import FormattingAction, ToolbarState
from wikitext_engine.session import EditorSession


@dataclass
class Recorder:
    buffers: List[str] = field(default_factory=list)
    statuses: List[str] = field(default_factory=list)
    toolbars: List[ToolbarState] = field(default_factory=list)
    events: List[tuple[str, object | None]] = field(default_factory=list)
    logs: List[str] = field(default_factory=list)


def make_adapter(text: str = "") -> tuple[EditorHostAdapter, Recorder]:
    record = Recorder()
    hooks = EditorUIHooks(
        update_buffer=lambda mirror: record.buffers.append(mirror.text),
        update_status=record.statuses.append,
        update_toolbar=record.toolbars.append,
        handle_event=lambda name, payload: record.events.append((name, payload)),
        log=record.logs.append,
    )
    return EditorHostAdapter(EditorSession.from_text(text), hooks), record


def test_adapter_updates_buffer_and_status() -> None:
    adapter, record = make_adapter()

    adapter.handle_command("format.bold")

    assert record.buffers == ["", "''''''"]
    assert record.statuses[-1] == "bold:added"


def test_adapter_resolves_shortcuts() -> None:
    adapter, _record = make_adapter("word")
    adapter.handle_selection(0, 4)

    result = adapter.handle_key("i", modifiers=("ctrl",))

    assert result is not None
    assert result.text == "''word''"
    assert adapter.handle_key("q", modifiers=("ctrl",)) is None


def test_host_edit_refreshes_toolbar() -> None:
    adapter, record = make_adapter()

    adapter.push_host_edit(BufferMirror(text="a '''b''' c", selection=Selection.cursor(5)))

    assert adapter.session.buffer.text == "a '''b''' c"
    assert record.toolbars[-1].is_active(FormattingAction.BOLD)
    assert adapter.pull_buffer().active == ("bold",)


def test_selection_is_clamped_by_default() -> None:
    adapter, _record = make_adapter("abc")

    assert adapter.handle_selection(-3, 40) == Selection(0, 3)


def test_adapter_relays_events_and_logs() -> None:
    adapter, record = make_adapter("x")

    adapter.handle_command("format.list.bullet")

    names = [name for name, _payload in record.events]
    assert names == ["formatting.applied", "wikitext.changed", "selection.changed"]
    assert adapter.session.buffer.text == "*x"
    assert any(line.startswith("command ->") for line in record.logs)
    assert any("status='added'" in line for line in record.logs)
