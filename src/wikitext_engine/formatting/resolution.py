"""Add-vs-remove decisions for toolbar actions."""

from __future__ import annotations

from wikitext_engine.attributes import AttributeLookup, query_any
from wikitext_engine.buffer import Selection

from .models import TOGGLE_ATTRIBUTES, FormattingAction, ToggleDecision

_GATED_ACTIONS = frozenset({FormattingAction.INDENT, FormattingAction.UNINDENT})


def action_is_active(
    lookup: AttributeLookup,
    length: int,
    selection: Selection,
    action: FormattingAction,
    *,
    probe_neighbors: bool = True,
) -> bool:
    attributes = TOGGLE_ATTRIBUTES.get(action)
    if not attributes:
        raise KeyError(f"Action '{action.value}' has no toggle attribute")
    return query_any(
        lookup, length, selection, attributes, probe_neighbors=probe_neighbors
    )


def resolve_toggle(action: FormattingAction, active: bool) -> ToggleDecision:
    """Paired styles and list markers flip; indent/unindent need a list line."""

    if action is FormattingAction.HEADING:
        raise ValueError("heading changes are planned with plan_heading")
    if action in _GATED_ACTIONS:
        return ToggleDecision.ADD if active else ToggleDecision.NOOP
    return ToggleDecision.REMOVE if active else ToggleDecision.ADD


__all__ = ["action_is_active", "resolve_toggle"]
