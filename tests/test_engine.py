from typing import List

import pytest

import wikitext_engine.formatting.engine as engine_module
from wikitext_engine.attributes import Attribute, AttributeMap, AttributeSpan
from wikitext_engine.buffer import Buffer, Selection
from wikitext_engine.formatting import (
    FormattingAction,
    FormattingEngine,
    FormattingRequest,
    FormattingResult,
)
from wikitext_engine.formatting.delimiters import require_shift
from wikitext_engine.session import EditorSession


def make_session(text: str, start: int = 0, end: int | None = None) -> EditorSession:
    session = EditorSession.from_text(text)
    session.select(start, start if end is None else end)
    return session


def make_engine_case(
    text: str, cursor: int, *spans: tuple[Attribute, int, int]
) -> tuple[FormattingEngine, Buffer, AttributeMap]:
    buffer = Buffer.from_text(text, selection=Selection.cursor(cursor))
    attributes = AttributeMap(AttributeSpan(attr, start, end) for attr, start, end in spans)
    return FormattingEngine(), buffer, attributes


def test_bold_on_empty_buffer_places_cursor_between_tokens() -> None:
    session = make_session("")

    result = session.apply(FormattingAction.BOLD)

    assert result.status == "added"
    assert result.text == "''''''"
    assert result.selection == Selection.cursor(3)


def test_bold_toggles_off_inside_bold_text() -> None:
    session = make_session("a '''b''' c", 5)

    result = session.apply(FormattingAction.BOLD)

    assert result.status == "removed"
    assert session.buffer.text == "a b c"
    assert not session.toolbar_state().is_active(FormattingAction.BOLD)


def test_bold_round_trip_on_range() -> None:
    session = make_session("a b c", 2, 3)

    session.apply(FormattingAction.BOLD)
    assert session.buffer.text == "a '''b''' c"
    assert session.buffer.selection == Selection(5, 6)
    assert session.toolbar_state().is_active(FormattingAction.BOLD)

    session.apply(FormattingAction.BOLD)
    assert session.buffer.text == "a b c"
    assert session.buffer.selection == Selection(2, 3)


def test_italic_removed_from_bold_italic_leaves_bold() -> None:
    session = make_session("'''''x'''''", 5)
    assert session.toolbar_state().is_active(FormattingAction.ITALIC)

    result = session.apply(FormattingAction.ITALIC)

    assert result.status == "removed"
    assert session.buffer.text == "'''x'''"
    assert session.buffer.selection == Selection(3, 4)
    state = session.toolbar_state()
    assert state.is_active(FormattingAction.BOLD)
    assert not state.is_active(FormattingAction.ITALIC)


def test_reference_removal_keeps_inner_text_selected() -> None:
    session = make_session("See<ref>src</ref> more", 9)

    session.apply(FormattingAction.REFERENCE)

    assert session.buffer.text == "Seesrc more"
    assert session.buffer.selection == Selection(3, 6)


def test_heading_add_is_idempotent() -> None:
    session = make_session("Title", 0, 5)

    first = session.apply(FormattingAction.HEADING, depth=2)
    second = session.apply(FormattingAction.HEADING, depth=2)

    assert first.status == "added"
    assert second.status == "noop"
    assert not second.changed
    assert session.buffer.text == "==Title=="


def test_heading_switch_leaves_single_level() -> None:
    session = make_session("Title", 0, 5)
    session.apply(FormattingAction.HEADING, depth=2)

    result = session.apply(FormattingAction.HEADING, depth=3)

    assert result.status == "replaced"
    assert session.buffer.text == "===Title==="
    assert session.toolbar_state().heading_depth == 3
    assert session.attributes.spans(Attribute.HEADING_2) == ()


def test_heading_depth_one_is_noop() -> None:
    session = make_session("Title", 0, 5)

    result = session.apply(FormattingAction.HEADING, depth=1)

    assert result.status == "noop"
    assert session.buffer.text == "Title"


def test_bullet_toggle_removes_all_markers() -> None:
    session = make_session("***item", 4)

    result = session.apply(FormattingAction.LIST_BULLET)

    assert result.status == "removed"
    assert session.buffer.text == "item"
    assert session.buffer.selection == Selection.cursor(1)


def test_bullet_toggle_adds_marker() -> None:
    session = make_session("item", 2)

    session.apply(FormattingAction.LIST_BULLET)

    assert session.buffer.text == "*item"
    assert session.buffer.selection == Selection.cursor(3)


def test_indent_and_unindent_bullet_item() -> None:
    session = make_session("*a b", 2)

    session.apply(FormattingAction.INDENT)
    assert session.buffer.text == "**a b"

    session.apply(FormattingAction.UNINDENT)
    assert session.buffer.text == "*a b"

    result = session.apply(FormattingAction.UNINDENT)
    assert result.status == "noop"
    assert not result.changed


def test_unindent_numbered_item() -> None:
    session = make_session("##x y", 3)

    session.apply(FormattingAction.UNINDENT)

    assert session.buffer.text == "#x y"


def test_indent_outside_list_is_noop() -> None:
    session = make_session("plain text", 3)

    result = session.apply(FormattingAction.INDENT)

    assert result.status == "noop"
    assert session.buffer.text == "plain text"
    assert not session.toolbar_state().indent_enabled


def test_toolbar_reflects_list_line() -> None:
    session = make_session("* item", 2)

    state = session.toolbar_state()

    assert state.is_active(FormattingAction.LIST_BULLET)
    assert state.indent_enabled
    assert not state.range_selected
    assert state.names() == ("list_bullet",)


def test_session_emits_events() -> None:
    session = make_session("word", 0, 4)
    results: List[FormattingResult] = []
    changes: List[object] = []
    session.bus.subscribe("formatting.applied", results.append)
    session.bus.subscribe("wikitext.changed", changes.append)

    session.dispatch("format.template")

    assert session.buffer.text == "{{word}}"
    assert [result.status for result in results] == ["added"]
    assert len(changes) == 1


def test_attributes_retagged_after_edit() -> None:
    session = make_session("plain", 0, 5)
    assert session.attributes.spans(Attribute.BOLD) == ()

    session.apply(FormattingAction.BOLD)

    assert session.attributes.spans(Attribute.BOLD) != ()


def test_mixed_list_prefix_toggles_off_by_last_marker() -> None:
    session = make_session("#*item", 3)
    assert session.toolbar_state().is_active(FormattingAction.LIST_BULLET)

    result = session.apply(FormattingAction.LIST_BULLET)

    assert result.status == "removed"
    assert session.buffer.text == "item"
    assert session.buffer.selection == Selection.cursor(1)
    assert not session.toolbar_state().is_active(FormattingAction.LIST_BULLET)


def test_active_style_without_pair_falls_back_to_add() -> None:
    engine, buffer, attributes = make_engine_case("abc def", 4, (Attribute.BOLD, 0, 7))

    result = engine.apply(buffer, attributes, FormattingRequest(FormattingAction.BOLD))

    assert result.status == "added"
    assert result.text == "abc ''''''def"
    assert result.selection == Selection.cursor(7)


def test_heading_switch_without_old_markers_is_noop() -> None:
    engine, buffer, attributes = make_engine_case(
        "Title here", 3, (Attribute.HEADING_2, 0, 10)
    )

    result = engine.apply(
        buffer, attributes, FormattingRequest(FormattingAction.HEADING, depth=3)
    )

    assert result.status == "noop"
    assert not result.changed
    assert buffer.text == "Title here"


def test_boundary_failure_aborts_as_noop(monkeypatch: pytest.MonkeyPatch) -> None:
    def insert_past_start(buffer: Buffer, *_args: object, **_kwargs: object) -> int:
        return require_shift(buffer, 0, -1)

    monkeypatch.setattr(engine_module, "insert_delimiters", insert_past_start)
    engine, buffer, attributes = make_engine_case("word", 2)

    result = engine.apply(buffer, attributes, FormattingRequest(FormattingAction.BOLD))

    assert result.status == "noop"
    assert result.message == "boundary_unavailable"
    assert not result.changed
    assert buffer.text == "word"


def test_heading_switch_with_cursor_at_line_end() -> None:
    session = make_session("==Title==\nbody", 9)
    assert session.toolbar_state().heading_depth == 2

    result = session.apply(FormattingAction.HEADING, depth=3)

    assert result.status == "replaced"
    assert session.buffer.text == "===Title===\nbody"


def test_same_heading_with_cursor_at_line_start_is_noop() -> None:
    session = make_session("==Title==", 0)

    result = session.apply(FormattingAction.HEADING, depth=2)

    assert result.status == "noop"
    assert session.buffer.text == "==Title=="
