"""Stateless formatting engine: one call per toolbar gesture."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from wikitext_engine.attributes import AttributeLookup
from wikitext_engine.buffer import Buffer
from wikitext_engine.config import EngineSettings
from wikitext_engine.runtime import telemetry

from . import lists
from .delimiters import expand_to_delimiters, insert_delimiters, remove_delimiters
from .errors import BoundaryUnavailable, ExpansionNotFound
from .headings import current_heading_depth, heading_content, plan_heading
from .models import (
    LIST_MARKERS,
    PAIRED_OPERATIONS,
    FormattingAction,
    FormattingRequest,
    FormattingResult,
    ToggleDecision,
)
from .resolution import action_is_active, resolve_toggle

Handler = Callable[[Buffer, AttributeLookup, FormattingRequest, telemetry.SpanHandle], str]


class FormattingEngine:
    """Applies formatting requests to a borrowed buffer.

    The engine keeps no buffer or selection state between calls; the
    attribute lookup must describe the buffer as it is when ``apply`` runs.
    """

    def __init__(
        self,
        *,
        settings: Optional[EngineSettings] = None,
        logger_name: str | None = None,
    ) -> None:
        self.settings = settings or EngineSettings()
        self._logger_name = logger_name
        self._handlers: Dict[FormattingAction, Handler] = {
            action: self._toggle_paired for action in PAIRED_OPERATIONS
        }
        self._handlers.update(
            {
                FormattingAction.HEADING: self._apply_heading,
                FormattingAction.LIST_BULLET: self._toggle_list,
                FormattingAction.LIST_NUMBER: self._toggle_list,
                FormattingAction.INDENT: self._indent,
                FormattingAction.UNINDENT: self._unindent,
            }
        )

    def apply(
        self, buffer: Buffer, lookup: AttributeLookup, request: FormattingRequest
    ) -> FormattingResult:
        version_before = buffer.version
        message: Optional[str] = None
        with telemetry.span(
            f"formatting::{request.action.value}",
            logger_name=self._logger_name,
            component="formatting",
            metadata={"buffer": buffer.name, "depth": request.depth or 0},
        ) as handle:
            try:
                status = self._handlers[request.action](buffer, lookup, request, handle)
            except BoundaryUnavailable as exc:
                handle.skip(str(exc))
                status, message = "noop", "boundary_unavailable"
            handle.add_metadata("status", status)

        result = FormattingResult(
            request=request,
            status=status,
            text=buffer.text,
            selection=buffer.selection,
            version=buffer.version,
            changed=buffer.version != version_before,
            message=message,
        )
        telemetry.record_event(
            "formatting.applied",
            level="debug",
            logger_name=self._logger_name,
            data={
                "action": request.action.value,
                "status": status,
                "changed": result.changed,
            },
        )
        return result

    def is_active(
        self, buffer: Buffer, lookup: AttributeLookup, action: FormattingAction
    ) -> bool:
        return action_is_active(
            lookup,
            len(buffer.text),
            buffer.selection,
            action,
            probe_neighbors=self.settings.probe_neighbors,
        )

    def _toggle_paired(
        self,
        buffer: Buffer,
        lookup: AttributeLookup,
        request: FormattingRequest,
        handle: telemetry.SpanHandle,
    ) -> str:
        operation = PAIRED_OPERATIONS[request.action]
        decision = resolve_toggle(request.action, self.is_active(buffer, lookup, request.action))
        if decision is ToggleDecision.REMOVE:
            try:
                expansion = expand_to_delimiters(
                    buffer.text, buffer.selection, operation.start_token, operation.end_token
                )
            except ExpansionNotFound as exc:
                handle.add_metadata("fallback", "add")
                handle.skip(str(exc))
            else:
                remove_delimiters(
                    buffer,
                    operation.start_token,
                    operation.end_token,
                    selection=expansion.inner,
                )
                return "removed"
        insert_delimiters(buffer, operation.start_token, operation.end_token)
        return "added"

    def _apply_heading(
        self,
        buffer: Buffer,
        lookup: AttributeLookup,
        request: FormattingRequest,
        handle: telemetry.SpanHandle,
    ) -> str:
        line = buffer.line_content()
        current = current_heading_depth(
            lookup,
            len(buffer.text),
            buffer.selection,
            probe_neighbors=self.settings.probe_neighbors,
            line=line,
        )
        try:
            plan = plan_heading(current, int(request.depth or 0))
        except ValueError as exc:
            handle.skip(str(exc))
            return "noop"
        handle.add_metadata("current_depth", current)
        if plan.is_noop:
            return "noop"

        status = "added"
        if plan.remove is not None:
            # the old level must go first; two heading markers never share a line
            token = plan.remove.start_token
            try:
                inner = expand_to_delimiters(buffer.text, buffer.selection, token, token).inner
            except ExpansionNotFound as exc:
                # a cursor on the markers themselves cannot expand; use the line
                found = heading_content(buffer.text, line, token)
                if found is None:
                    handle.skip(str(exc))
                    return "noop"
                inner = found
            remove_delimiters(buffer, token, token, selection=inner)
            status = "replaced"
        if plan.add is not None:
            insert_delimiters(buffer, plan.add.start_token, plan.add.end_token)
        return status

    def _toggle_list(
        self,
        buffer: Buffer,
        lookup: AttributeLookup,
        request: FormattingRequest,
        handle: telemetry.SpanHandle,
    ) -> str:
        marker = LIST_MARKERS[request.action]
        decision = resolve_toggle(request.action, self.is_active(buffer, lookup, request.action))
        if decision is ToggleDecision.REMOVE:
            removed = lists.remove_list_marker(buffer, marker)
            handle.add_metadata("markers_removed", removed)
            return "removed" if removed else "noop"
        lists.insert_list_marker(buffer, marker)
        return "added"

    def _indent(
        self,
        buffer: Buffer,
        lookup: AttributeLookup,
        request: FormattingRequest,
        handle: telemetry.SpanHandle,
    ) -> str:
        decision = resolve_toggle(request.action, self.is_active(buffer, lookup, request.action))
        if decision is ToggleDecision.NOOP:
            handle.skip("not a list item")
            return "noop"
        return "added" if lists.indent_list_item(buffer) else "noop"

    def _unindent(
        self,
        buffer: Buffer,
        lookup: AttributeLookup,
        request: FormattingRequest,
        handle: telemetry.SpanHandle,
    ) -> str:
        decision = resolve_toggle(request.action, self.is_active(buffer, lookup, request.action))
        if decision is ToggleDecision.NOOP:
            handle.skip("not a list item")
            return "noop"
        return "removed" if lists.unindent_list_item(buffer) else "noop"


__all__ = ["FormattingEngine"]
