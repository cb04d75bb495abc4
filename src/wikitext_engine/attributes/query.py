"""Selection-level attribute queries (toolbar highlighting, toggle state)."""

from __future__ import annotations

from typing import Iterable, Tuple

from wikitext_engine.buffer.state import Selection

from .models import Attribute, AttributeLookup


def target_range(
    length: int, selection: Selection, *, probe_neighbors: bool = True
) -> Tuple[int, int]:
    """Range actually inspected for ``selection``.

    A cursor that is neither at the document start nor on its last
    character is widened to the two characters straddling it, so a cursor
    between two bold words still reads as bold.
    """

    start = selection.start
    if (
        probe_neighbors
        and selection.is_empty
        and start > 0
        and length > 1
        and length > start + 1
    ):
        return start - 1, start + 1
    return selection.start, selection.end


def query_attribute(
    lookup: AttributeLookup,
    length: int,
    selection: Selection,
    attribute: Attribute,
    *,
    probe_neighbors: bool = True,
) -> bool:
    """True when ``attribute`` covers the whole inspected range."""

    start, end = target_range(length, selection, probe_neighbors=probe_neighbors)
    if start >= end:
        return False
    seen = False
    for run in lookup.runs(attribute, start, end):
        if not run.value:
            return False
        seen = True
    return seen


def query_any(
    lookup: AttributeLookup,
    length: int,
    selection: Selection,
    attributes: Iterable[Attribute],
    *,
    probe_neighbors: bool = True,
) -> bool:
    return any(
        query_attribute(
            lookup, length, selection, attribute, probe_neighbors=probe_neighbors
        )
        for attribute in attributes
    )


__all__ = ["query_any", "query_attribute", "target_range"]
