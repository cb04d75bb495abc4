"""Toolbar button state derived from the attributes under the selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from wikitext_engine.attributes import AttributeLookup
from wikitext_engine.buffer import Selection

from .headings import current_heading_depth
from .models import TOGGLE_ATTRIBUTES, FormattingAction
from .resolution import action_is_active

_BUTTON_ACTIONS = tuple(
    action
    for action in TOGGLE_ATTRIBUTES
    if action not in {FormattingAction.INDENT, FormattingAction.UNINDENT}
)


@dataclass(frozen=True, slots=True)
class ToolbarState:
    active: frozenset[FormattingAction]
    heading_depth: int
    range_selected: bool
    indent_enabled: bool

    def is_active(self, action: FormattingAction) -> bool:
        return action in self.active

    def names(self) -> tuple[str, ...]:
        names = sorted(action.value for action in self.active)
        if self.heading_depth:
            names = [
                f"heading_{self.heading_depth}" if name == "heading" else name
                for name in names
            ]
        return tuple(names)


def compute_toolbar_state(
    lookup: AttributeLookup,
    length: int,
    selection: Selection,
    *,
    probe_neighbors: bool = True,
    line: Optional[Selection] = None,
) -> ToolbarState:
    active = {
        action
        for action in _BUTTON_ACTIONS
        if action_is_active(
            lookup, length, selection, action, probe_neighbors=probe_neighbors
        )
    }
    depth = current_heading_depth(
        lookup, length, selection, probe_neighbors=probe_neighbors, line=line
    )
    if depth:
        active.add(FormattingAction.HEADING)
    in_list = bool(
        active & {FormattingAction.LIST_BULLET, FormattingAction.LIST_NUMBER}
    )
    return ToolbarState(
        active=frozenset(active),
        heading_depth=depth,
        range_selected=not selection.is_empty,
        indent_enabled=in_list,
    )


__all__ = ["ToolbarState", "compute_toolbar_state"]
