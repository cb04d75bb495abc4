"""In-memory attribute span store implementing ``AttributeLookup``."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Set, Tuple

from .models import Attribute, AttributeRun, AttributeSpan


class AttributeMap:
    """Keeps merged, sorted coverage intervals per attribute.

    ``add`` only records the interval; each attribute is sorted and merged
    once, on the first read after it changed.
    """

    def __init__(self, spans: Iterable[AttributeSpan] = ()) -> None:
        self._intervals: Dict[Attribute, List[Tuple[int, int]]] = {}
        self._dirty: Set[Attribute] = set()
        for span in spans:
            self.add(span.attribute, span.start, span.end)

    def add(self, attribute: Attribute, start: int, end: int) -> None:
        if end <= start:
            return
        self._intervals.setdefault(attribute, []).append((start, end))
        self._dirty.add(attribute)

    def _merged(self) -> Dict[Attribute, List[Tuple[int, int]]]:
        for attribute in self._dirty:
            merged: List[Tuple[int, int]] = []
            for lo, hi in sorted(self._intervals[attribute]):
                if merged and lo <= merged[-1][1]:
                    merged[-1] = (merged[-1][0], max(merged[-1][1], hi))
                else:
                    merged.append((lo, hi))
            self._intervals[attribute] = merged
        self._dirty.clear()
        return self._intervals

    def spans(self, attribute: Attribute) -> tuple[AttributeSpan, ...]:
        return tuple(
            AttributeSpan(attribute, lo, hi)
            for lo, hi in self._merged().get(attribute, ())
        )

    def attributes(self) -> frozenset[Attribute]:
        return frozenset(self._merged())

    def attributes_at(self, offset: int) -> frozenset[Attribute]:
        return frozenset(
            attribute
            for attribute, intervals in self._merged().items()
            if any(lo <= offset < hi for lo, hi in intervals)
        )

    def runs(self, attribute: Attribute, start: int, end: int) -> Iterator[AttributeRun]:
        cursor = start
        for lo, hi in self._merged().get(attribute, ()):
            if hi <= cursor:
                continue
            if lo >= end:
                break
            if lo > cursor:
                yield AttributeRun(cursor, lo, False)
                cursor = lo
            stop = min(hi, end)
            yield AttributeRun(cursor, stop, True)
            cursor = stop
        if cursor < end:
            yield AttributeRun(cursor, end, False)

    def __len__(self) -> int:
        return sum(len(intervals) for intervals in self._merged().values())

    def __repr__(self) -> str:
        counts = {attr.value: len(iv) for attr, iv in self._merged().items()}
        return f"AttributeMap({counts})"


__all__ = ["AttributeMap"]
