import pytest

from wikitext_engine.buffer import (
    Buffer,
    BufferValidationError,
    Selection,
    TextDocument,
    clamp_selection,
)


def make_buffer(text: str = "ab\ncd", start: int = 0, end: int | None = None) -> Buffer:
    return Buffer.from_text(text, selection=Selection(start, start if end is None else end))


def test_selection_rejects_reversed_range() -> None:
    with pytest.raises(ValueError):
        Selection(3, 1)


def test_select_outside_document_raises() -> None:
    buffer = make_buffer()

    with pytest.raises(BufferValidationError):
        buffer.select(0, 42)


def test_replace_range_collapses_cursor_and_bumps_version() -> None:
    buffer = make_buffer("hello world")

    delta = buffer.replace_range(0, 5, "howdy", label="test")

    assert buffer.text == "howdy world"
    assert buffer.selection == Selection.cursor(5)
    assert delta.version == buffer.version == 1
    assert delta.label == "test"


def test_replace_range_keeps_explicit_selection() -> None:
    buffer = make_buffer("abc")

    buffer.replace_range(1, 1, "XY", label="test", selection=Selection(0, 5))

    assert buffer.text == "aXYbc"
    assert buffer.selection == Selection(0, 5)


def test_line_range_includes_terminator() -> None:
    buffer = make_buffer("ab\ncd", 1)
    assert buffer.line_range() == (0, 3)

    buffer.select(4, 4)
    assert buffer.line_range() == (3, 5)


def test_position_from_stays_inside_document() -> None:
    buffer = make_buffer("abc")

    assert buffer.position_from(1, 2) == 3
    assert buffer.position_from(1, 3) is None
    assert buffer.position_from(1, -2) is None


def test_clamp_selection_orders_and_bounds() -> None:
    document = TextDocument.from_text("abcdef")

    assert clamp_selection(document, 9, -4) == Selection(0, 6)
    assert clamp_selection(document, 4, 2) == Selection(2, 4)


def test_mirror_carries_version_and_active_names() -> None:
    buffer = make_buffer("abc", 1, 2)
    buffer.insert_text("z", at=0)

    mirror = buffer.mirror(active=("bold",))

    assert mirror.text == "zabc"
    assert mirror.version == 1
    assert mirror.active == ("bold",)
