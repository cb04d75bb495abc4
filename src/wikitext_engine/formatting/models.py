"""Formatting actions, delimiter operations and engine results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from wikitext_engine.attributes import HEADING_ATTRIBUTES, Attribute
from wikitext_engine.buffer.state import Selection

MIN_HEADING_DEPTH = 2
MAX_HEADING_DEPTH = 6


class FormattingAction(str, Enum):
    BOLD = "bold"
    ITALIC = "italic"
    TEMPLATE = "template"
    REFERENCE = "reference"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    HEADING = "heading"
    LIST_BULLET = "list_bullet"
    LIST_NUMBER = "list_number"
    INDENT = "indent"
    UNINDENT = "unindent"


class ToggleDecision(str, Enum):
    ADD = "add"
    REMOVE = "remove"
    NOOP = "noop"


@dataclass(frozen=True, slots=True)
class FormattingOperation:
    """A delimiter pair and the attribute whose presence it toggles."""

    action: FormattingAction
    start_token: str
    end_token: str
    attribute: Attribute

    def __post_init__(self) -> None:
        if not self.start_token or not self.end_token:
            raise ValueError("delimiter tokens cannot be empty")

    @property
    def symmetric(self) -> bool:
        return self.start_token == self.end_token

    @property
    def delta(self) -> int:
        return len(self.end_token) - len(self.start_token)


def _paired(
    action: FormattingAction, start: str, end: str, attribute: Attribute
) -> FormattingOperation:
    return FormattingOperation(action, start, end, attribute)


PAIRED_OPERATIONS: Mapping[FormattingAction, FormattingOperation] = MappingProxyType(
    {
        FormattingAction.BOLD: _paired(
            FormattingAction.BOLD, "'''", "'''", Attribute.BOLD
        ),
        FormattingAction.ITALIC: _paired(
            FormattingAction.ITALIC, "''", "''", Attribute.ITALIC
        ),
        FormattingAction.TEMPLATE: _paired(
            FormattingAction.TEMPLATE, "{{", "}}", Attribute.TEMPLATE
        ),
        FormattingAction.REFERENCE: _paired(
            FormattingAction.REFERENCE, "<ref>", "</ref>", Attribute.REFERENCE
        ),
        FormattingAction.SUPERSCRIPT: _paired(
            FormattingAction.SUPERSCRIPT, "<sup>", "</sup>", Attribute.SUPERSCRIPT
        ),
        FormattingAction.SUBSCRIPT: _paired(
            FormattingAction.SUBSCRIPT, "<sub>", "</sub>", Attribute.SUBSCRIPT
        ),
        FormattingAction.UNDERLINE: _paired(
            FormattingAction.UNDERLINE, "<u>", "</u>", Attribute.UNDERLINE
        ),
        FormattingAction.STRIKETHROUGH: _paired(
            FormattingAction.STRIKETHROUGH, "<s>", "</s>", Attribute.STRIKETHROUGH
        ),
    }
)

# Bold and italic also read as active on text that is both.
TOGGLE_ATTRIBUTES: Mapping[FormattingAction, tuple[Attribute, ...]] = MappingProxyType(
    {
        FormattingAction.BOLD: (Attribute.BOLD_ITALIC, Attribute.BOLD),
        FormattingAction.ITALIC: (Attribute.BOLD_ITALIC, Attribute.ITALIC),
        FormattingAction.TEMPLATE: (Attribute.TEMPLATE,),
        FormattingAction.REFERENCE: (Attribute.REFERENCE,),
        FormattingAction.SUPERSCRIPT: (Attribute.SUPERSCRIPT,),
        FormattingAction.SUBSCRIPT: (Attribute.SUBSCRIPT,),
        FormattingAction.UNDERLINE: (Attribute.UNDERLINE,),
        FormattingAction.STRIKETHROUGH: (Attribute.STRIKETHROUGH,),
        FormattingAction.LIST_BULLET: (Attribute.LIST_BULLET,),
        FormattingAction.LIST_NUMBER: (Attribute.LIST_NUMBER,),
        FormattingAction.INDENT: (Attribute.LIST_BULLET, Attribute.LIST_NUMBER),
        FormattingAction.UNINDENT: (Attribute.LIST_BULLET, Attribute.LIST_NUMBER),
    }
)

LIST_MARKERS: Mapping[FormattingAction, str] = MappingProxyType(
    {FormattingAction.LIST_BULLET: "*", FormattingAction.LIST_NUMBER: "#"}
)


def heading_token(depth: int) -> str:
    if not MIN_HEADING_DEPTH <= depth <= MAX_HEADING_DEPTH:
        raise ValueError(
            f"heading depth must be {MIN_HEADING_DEPTH}-{MAX_HEADING_DEPTH}, got {depth}"
        )
    return "=" * depth


def heading_operation(depth: int) -> FormattingOperation:
    token = heading_token(depth)
    return FormattingOperation(
        FormattingAction.HEADING, token, token, HEADING_ATTRIBUTES[depth]
    )


@dataclass(frozen=True, slots=True)
class FormattingRequest:
    action: FormattingAction
    depth: Optional[int] = None

    def __post_init__(self) -> None:
        if self.action is FormattingAction.HEADING and self.depth is None:
            raise ValueError("heading requests require a depth")
        if self.action is not FormattingAction.HEADING and self.depth is not None:
            raise ValueError(f"{self.action.value} requests take no depth")


@dataclass(frozen=True, slots=True)
class FormattingResult:
    """Outcome of one engine call, handed back to the host."""

    request: FormattingRequest
    status: str
    text: str
    selection: Selection
    version: int
    changed: bool
    message: Optional[str] = None


__all__ = [
    "FormattingAction",
    "FormattingOperation",
    "FormattingRequest",
    "FormattingResult",
    "ToggleDecision",
    "LIST_MARKERS",
    "PAIRED_OPERATIONS",
    "TOGGLE_ATTRIBUTES",
    "MIN_HEADING_DEPTH",
    "MAX_HEADING_DEPTH",
    "heading_operation",
    "heading_token",
]
