"""Delimiter formatting: operations, expansion, list/heading edits and the engine."""

from .delimiters import (
    Expansion,
    expand_to_delimiters,
    insert_delimiters,
    is_surrounded,
    remove_delimiters,
    try_shift,
)
from .engine import FormattingEngine
from .errors import BoundaryUnavailable, ExpansionNotFound, FormattingError
from .headings import HeadingPlan, current_heading_depth, heading_content, plan_heading
from .lists import (
    indent_list_item,
    insert_list_marker,
    remove_list_marker,
    unindent_list_item,
)
from .models import (
    LIST_MARKERS,
    PAIRED_OPERATIONS,
    TOGGLE_ATTRIBUTES,
    FormattingAction,
    FormattingOperation,
    FormattingRequest,
    FormattingResult,
    ToggleDecision,
    heading_operation,
    heading_token,
)
from .resolution import action_is_active, resolve_toggle
from .toolbar import ToolbarState, compute_toolbar_state

__all__ = [
    "BoundaryUnavailable",
    "Expansion",
    "ExpansionNotFound",
    "FormattingAction",
    "FormattingEngine",
    "FormattingError",
    "FormattingOperation",
    "FormattingRequest",
    "FormattingResult",
    "HeadingPlan",
    "LIST_MARKERS",
    "PAIRED_OPERATIONS",
    "TOGGLE_ATTRIBUTES",
    "ToggleDecision",
    "ToolbarState",
    "action_is_active",
    "compute_toolbar_state",
    "current_heading_depth",
    "expand_to_delimiters",
    "heading_content",
    "heading_operation",
    "heading_token",
    "indent_list_item",
    "insert_delimiters",
    "insert_list_marker",
    "is_surrounded",
    "plan_heading",
    "remove_delimiters",
    "remove_list_marker",
    "resolve_toggle",
    "try_shift",
    "unindent_list_item",
]
