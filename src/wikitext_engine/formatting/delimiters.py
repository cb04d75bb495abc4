"""Locating, inserting and stripping paired delimiters around a selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from wikitext_engine.buffer import Buffer, Selection

from .errors import BoundaryUnavailable, ExpansionNotFound

LINE_BREAK = "\n"


@dataclass(frozen=True, slots=True)
class Expansion:
    """Selection grown out to the nearest delimiters; ``start``/``end`` are inner."""

    start: int
    end: int
    start_token: str
    end_token: str

    @property
    def inner(self) -> Selection:
        return Selection(self.start, self.end)

    @property
    def outer(self) -> Selection:
        return Selection(self.start - len(self.start_token), self.end + len(self.end_token))


def preceded_by(text: str, offset: int, token: str) -> bool:
    begin = offset - len(token)
    if begin < 0:
        return False
    return text[begin:offset] == token


def followed_by(text: str, offset: int, token: str) -> bool:
    stop = offset + len(token)
    if stop > len(text):
        return False
    return text[offset:stop] == token


def is_surrounded(text: str, selection: Selection, start_token: str, end_token: str) -> bool:
    return preceded_by(text, selection.start, start_token) and followed_by(
        text, selection.end, end_token
    )


def _scan_left(text: str, offset: int, token: str, opposite: Optional[str]) -> Optional[int]:
    while offset >= 0:
        if preceded_by(text, offset, token):
            return offset
        if preceded_by(text, offset, LINE_BREAK):
            return None
        if opposite is not None and preceded_by(text, offset, opposite):
            return None
        offset -= 1
    return None


def _scan_right(text: str, offset: int, token: str, opposite: Optional[str]) -> Optional[int]:
    while offset <= len(text):
        if followed_by(text, offset, token):
            return offset
        if followed_by(text, offset, LINE_BREAK):
            return None
        if opposite is not None and followed_by(text, offset, opposite):
            return None
        offset += 1
    return None


def expand_to_delimiters(
    text: str, selection: Selection, start_token: str, end_token: str
) -> Expansion:
    """Grow ``selection`` outward until it sits between ``start_token`` and ``end_token``.

    Each side scans independently and never crosses a line break. For
    asymmetric pairs (``<ref>``/``</ref>``) meeting the opposite token also
    stops the scan, so a neighbouring pair is never swallowed.

    Raises ``ExpansionNotFound`` when either side comes up empty.
    """

    opposite_end = end_token if start_token != end_token else None
    opposite_start = start_token if start_token != end_token else None
    start = _scan_left(text, selection.start, start_token, opposite_end)
    end = _scan_right(text, selection.end, end_token, opposite_start)
    if start is None or end is None:
        raise ExpansionNotFound(start_token, end_token)
    return Expansion(start=start, end=end, start_token=start_token, end_token=end_token)


def try_shift(buffer: Buffer, offset: int, delta: int) -> Optional[int]:
    return buffer.position_from(offset, delta)


def require_shift(buffer: Buffer, offset: int, delta: int) -> int:
    position = try_shift(buffer, offset, delta)
    if position is None:
        raise BoundaryUnavailable(offset, delta)
    return position


def insert_delimiters(
    buffer: Buffer,
    start_token: str,
    end_token: str,
    *,
    selection: Optional[Selection] = None,
) -> Selection:
    """Wrap the selection (or the cursor) in ``start_token``/``end_token``.

    A cursor lands between the two tokens; a range keeps covering the same
    text at its new position.
    """

    target = selection or buffer.selection
    require_shift(buffer, target.start, 0)
    require_shift(buffer, target.end, 0)
    lead = len(start_token)
    if target.is_empty:
        buffer.replace_range(
            target.start,
            target.end,
            start_token + end_token,
            label="insert_delimiters",
            selection=Selection.cursor(target.start + lead),
        )
        return buffer.selection

    delta = len(end_token) - len(start_token)
    selected = buffer.text_in(target.start, target.end)
    buffer.replace_range(
        target.start,
        target.end,
        start_token + selected + end_token,
        label="wrap_delimiters",
        selection=Selection(target.start + lead, target.end + len(end_token) - delta),
    )
    return buffer.selection


def remove_delimiters(
    buffer: Buffer,
    start_token: str,
    end_token: str,
    *,
    selection: Optional[Selection] = None,
) -> Selection:
    """Strip the pair immediately surrounding ``selection``.

    Every boundary is resolved before the first edit, so a failure leaves
    the buffer untouched.
    """

    target = selection or buffer.selection
    lead_start = require_shift(buffer, target.start, -len(start_token))
    trail_end = require_shift(buffer, target.end, len(end_token))
    if not is_surrounded(buffer.text, target, start_token, end_token):
        raise ExpansionNotFound(start_token, end_token)

    delta = len(end_token) - len(start_token)
    restored = Selection(
        target.start - len(start_token),
        target.end - len(end_token) + delta,
    )
    # trailing token first; removing the leading one would shift its offsets
    buffer.replace_range(
        target.end, trail_end, "", label="remove_end_token", selection=target
    )
    buffer.replace_range(
        lead_start, target.start, "", label="remove_start_token", selection=restored
    )
    return buffer.selection


__all__ = [
    "Expansion",
    "LINE_BREAK",
    "expand_to_delimiters",
    "followed_by",
    "insert_delimiters",
    "is_surrounded",
    "preceded_by",
    "remove_delimiters",
    "require_shift",
    "try_shift",
]
