"""Heading level detection and level-switch planning."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from wikitext_engine.attributes import HEADING_ATTRIBUTES, AttributeLookup, query_attribute
from wikitext_engine.buffer import Selection

from .models import FormattingOperation, heading_operation


def current_heading_depth(
    lookup: AttributeLookup,
    length: int,
    selection: Selection,
    *,
    probe_neighbors: bool = True,
    line: Optional[Selection] = None,
) -> int:
    """Active heading level under ``selection``, 0 when the line is no heading.

    A heading span always covers its whole line, so a cursor whose probe
    finds nothing (at either edge of the line) is checked against ``line``.
    """

    candidates = [selection]
    if selection.is_empty and line is not None and not line.is_empty:
        candidates.append(line)
    for target in candidates:
        for depth, attribute in HEADING_ATTRIBUTES.items():
            if query_attribute(
                lookup, length, target, attribute, probe_neighbors=probe_neighbors
            ):
                return depth
    return 0


def heading_content(text: str, line: Selection, token: str) -> Optional[Selection]:
    """Range between the ``token`` markers of a heading filling ``line``."""

    content = text[line.start : line.end].rstrip(" \t")
    inner_start = line.start + len(token)
    inner_end = line.start + len(content) - len(token)
    if inner_end <= inner_start:
        return None
    if not (content.startswith(token) and content.endswith(token)):
        return None
    if text[inner_start] == "=" or text[inner_end - 1] == "=":
        return None
    return Selection(inner_start, inner_end)


@dataclass(frozen=True, slots=True)
class HeadingPlan:
    current: int
    requested: int
    remove: Optional[FormattingOperation]
    add: Optional[FormattingOperation]

    @property
    def is_noop(self) -> bool:
        return self.remove is None and self.add is None


def plan_heading(current: int, requested: int) -> HeadingPlan:
    """Markers to strip and to add when switching ``current`` -> ``requested``.

    Raises ``ValueError`` for a level outside 2-6.
    """

    add = heading_operation(requested)
    if current == requested:
        return HeadingPlan(current, requested, None, None)
    remove = heading_operation(current) if current else None
    return HeadingPlan(current, requested, remove, add)


__all__ = ["HeadingPlan", "current_heading_depth", "heading_content", "plan_heading"]
