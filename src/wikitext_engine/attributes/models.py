"""Attribute tags and the lookup capability the engine reads them through."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping, Protocol


class Attribute(str, Enum):
    """Semantic tags a syntax tagger attaches to ranges of wikitext."""

    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold_italic"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    HEADING_4 = "heading_4"
    HEADING_5 = "heading_5"
    HEADING_6 = "heading_6"
    TEMPLATE = "template"
    REFERENCE = "reference"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    LIST_BULLET = "list_bullet"
    LIST_NUMBER = "list_number"


HEADING_ATTRIBUTES: Mapping[int, Attribute] = MappingProxyType(
    {
        2: Attribute.HEADING_2,
        3: Attribute.HEADING_3,
        4: Attribute.HEADING_4,
        5: Attribute.HEADING_5,
        6: Attribute.HEADING_6,
    }
)


@dataclass(frozen=True, slots=True)
class AttributeSpan:
    attribute: Attribute
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid span [{self.start}, {self.end})")


@dataclass(frozen=True, slots=True)
class AttributeRun:
    """Maximal stretch of a queried range sharing one attribute value."""

    start: int
    end: int
    value: bool


class AttributeLookup(Protocol):
    """Read-only capability: report an attribute's runs over ``[start, end)``."""

    def runs(self, attribute: Attribute, start: int, end: int) -> Iterator[AttributeRun]:
        ...


__all__ = [
    "Attribute",
    "AttributeLookup",
    "AttributeRun",
    "AttributeSpan",
    "HEADING_ATTRIBUTES",
]
