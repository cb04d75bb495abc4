"""Line-level list marker edits (``*`` bullets, ``#`` numbers)."""

from __future__ import annotations

from wikitext_engine.buffer import Buffer, Selection

LIST_MARKER_CHARS = "*#"


def _leading_run(text: str, line_start: int, chars: str) -> int:
    count = 0
    while line_start + count < len(text) and text[line_start + count] in chars:
        count += 1
    return count


def leading_markers(buffer: Buffer) -> str:
    """Marker prefix (``*`` / ``#`` mix) of the line holding the selection."""

    line_start, _ = buffer.line_range()
    count = _leading_run(buffer.text, line_start, LIST_MARKER_CHARS)
    return buffer.text_in(line_start, line_start + count)


def _retreat(offset: int, count: int, floor: int) -> int:
    if offset < floor:
        return offset
    return max(floor, offset - count)


def _delete_at_line_start(buffer: Buffer, count: int, *, label: str) -> int:
    line_start, _ = buffer.line_range()
    selection = buffer.selection
    shifted = Selection(
        _retreat(selection.start, count, line_start),
        _retreat(selection.end, count, line_start),
    )
    buffer.replace_range(
        line_start, line_start + count, "", label=label, selection=shifted
    )
    return count


def remove_list_marker(buffer: Buffer, marker: str) -> int:
    """Delete the marker prefix of a line whose list style is ``marker``.

    The style of a mixed prefix such as ``#*`` is its last character, so
    the whole run goes when that character is ``marker``. Returns how many
    characters were removed; the selection moves back by that many without
    leaving the line.
    """

    markers = leading_markers(buffer)
    if not markers or markers[-1] != marker:
        return 0
    count = len(markers)
    return _delete_at_line_start(buffer, count, label="remove_list_marker")


def insert_list_marker(buffer: Buffer, marker: str) -> int:
    line_start, _ = buffer.line_range()
    selection = buffer.selection
    buffer.replace_range(
        line_start,
        line_start,
        marker,
        label="insert_list_marker",
        selection=Selection(selection.start + len(marker), selection.end + len(marker)),
    )
    return len(marker)


def indent_list_item(buffer: Buffer) -> int:
    """Nest the current item one level deeper, reusing its leading marker."""

    markers = leading_markers(buffer)
    if not markers:
        return 0
    return insert_list_marker(buffer, markers[0])


def unindent_list_item(buffer: Buffer) -> int:
    """Drop one nesting level; a top-level item keeps its single marker."""

    if len(leading_markers(buffer)) < 2:
        return 0
    return _delete_at_line_start(buffer, 1, label="unindent_list_item")


__all__ = [
    "LIST_MARKER_CHARS",
    "indent_list_item",
    "insert_list_marker",
    "leading_markers",
    "remove_list_marker",
    "unindent_list_item",
]
