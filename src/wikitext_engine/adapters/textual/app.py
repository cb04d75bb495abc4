"""Executable Textual app hosting the wikitext formatting engine."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when demo is run
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.widgets import Footer, Header, Static, TextArea
    from textual.widgets.text_area import Selection as AreaSelection
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' extra to use wikitext_engine.adapters.textual.app"
    ) from exc

from wikitext_engine.adapters.host import EditorHostAdapter, EditorUIHooks
from wikitext_engine.buffer import BufferMirror, Selection
from wikitext_engine.config import EngineSettings
from wikitext_engine.formatting import ToolbarState
from wikitext_engine.session import EditorSession

Location = Tuple[int, int]


def offset_for_location(text: str, location: Location) -> int:
    lines = text.split("\n")
    row, col = location
    row = max(0, min(row, len(lines) - 1))
    offset = sum(len(lines[i]) + 1 for i in range(row))
    return offset + min(col, len(lines[row]))


def location_for_offset(text: str, offset: int) -> Location:
    running = 0
    lines = text.split("\n")
    for row, line in enumerate(lines):
        if offset <= running + len(line):
            return (row, offset - running)
        running += len(line) + 1
    return (len(lines) - 1, len(lines[-1]))


class WikitextEditorApp(App[None]):
    """TextArea editor with a formatting toolbar line driven by the engine."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #editor {
        height: 1fr;
    }

    #toolbar-line {
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }

    #status-line {
        height: 1;
        background: $surface-darken-2;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+b", "format('format.bold')", "Bold", priority=True),
        Binding("ctrl+t", "format('format.italic')", "Italic", priority=True),
        Binding("ctrl+r", "format('format.reference')", "Ref", priority=True),
        Binding("ctrl+l", "format('format.list.bullet')", "Bullet", priority=True),
        Binding("ctrl+n", "format('format.list.number')", "Number", priority=True),
        Binding("ctrl+g", "format('format.heading.2')", "H2", priority=True),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, text: str = "", settings: Optional[EngineSettings] = None) -> None:
        super().__init__()
        self.session = EditorSession.from_text(text, settings=settings)
        self.adapter: EditorHostAdapter | None = None
        self._editor: TextArea | None = None
        self._toolbar_widget: Static | None = None
        self._status_widget: Static | None = None
        self._syncing = False

    def compose(self) -> ComposeResult:
        yield Header()
        self._editor = TextArea(self.session.buffer.text, id="editor")
        yield self._editor
        self._toolbar_widget = Static("", id="toolbar-line")
        self._status_widget = Static("", id="status-line")
        yield self._toolbar_widget
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = EditorUIHooks(
            update_buffer=self._update_buffer,
            update_toolbar=self._update_toolbar,
            update_status=self._update_status,
        )
        self.adapter = EditorHostAdapter(self.session, hooks)

    def action_format(self, command_id: str) -> None:
        if self.adapter:
            self.adapter.handle_command(command_id)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if self._syncing or not self.adapter:
            return
        area = event.text_area
        self.adapter.push_host_edit(
            BufferMirror(text=area.text, selection=self._area_selection(area))
        )

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        if self._syncing or not self.adapter:
            return
        selection = self._area_selection(event.text_area)
        self.adapter.handle_selection(selection.start, selection.end)

    def _area_selection(self, area: TextArea) -> Selection:
        text = area.text
        first = offset_for_location(text, area.selection.start)
        second = offset_for_location(text, area.selection.end)
        return Selection(min(first, second), max(first, second))

    def _update_buffer(self, mirror: BufferMirror) -> None:
        if self._editor is None:
            return
        self._syncing = True
        try:
            if self._editor.text != mirror.text:
                self._editor.load_text(mirror.text)
            self._editor.selection = AreaSelection(
                location_for_offset(mirror.text, mirror.selection.start),
                location_for_offset(mirror.text, mirror.selection.end),
            )
        finally:
            self._syncing = False

    def _update_toolbar(self, state: ToolbarState) -> None:
        if self._toolbar_widget is None:
            return
        active = ", ".join(state.names()) or "plain"
        indent = "indent on" if state.indent_enabled else "indent off"
        self._toolbar_widget.update(f"[{active}] {indent}")

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the wikitext editor demo.")
    parser.add_argument(
        "path",
        nargs="?",
        default=os.environ.get("WIKITEXT_ENGINE_DEMO_FILE"),
        help="Wikitext file to open (read only; edits are not saved)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    settings = EngineSettings.from_env()
    settings.apply_logging()
    text = Path(args.path).read_text(encoding="utf-8") if args.path else ""
    WikitextEditorApp(text=text, settings=settings).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
