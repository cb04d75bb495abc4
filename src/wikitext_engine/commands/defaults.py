"""Built-in toolbar commands and the keyboard shortcuts bound to them."""

from __future__ import annotations

from typing import Iterable, Sequence

from wikitext_engine.formatting.models import (
    MAX_HEADING_DEPTH,
    MIN_HEADING_DEPTH,
    FormattingAction,
)

from .models import CommandRef, Shortcut
from .registry import CommandRegistry

_STYLE_COMMANDS: tuple[CommandRef, ...] = (
    CommandRef("format.bold", FormattingAction.BOLD, description="Bold"),
    CommandRef("format.italic", FormattingAction.ITALIC, description="Italic"),
    CommandRef("format.template", FormattingAction.TEMPLATE, description="Template"),
    CommandRef("format.reference", FormattingAction.REFERENCE, description="Reference"),
    CommandRef(
        "format.superscript", FormattingAction.SUPERSCRIPT, description="Superscript"
    ),
    CommandRef("format.subscript", FormattingAction.SUBSCRIPT, description="Subscript"),
    CommandRef("format.underline", FormattingAction.UNDERLINE, description="Underline"),
    CommandRef(
        "format.strikethrough",
        FormattingAction.STRIKETHROUGH,
        description="Strikethrough",
    ),
    CommandRef(
        "format.list.bullet", FormattingAction.LIST_BULLET, description="Bulleted list"
    ),
    CommandRef(
        "format.list.number", FormattingAction.LIST_NUMBER, description="Numbered list"
    ),
    CommandRef("format.indent", FormattingAction.INDENT, description="Indent list item"),
    CommandRef(
        "format.unindent", FormattingAction.UNINDENT, description="Unindent list item"
    ),
)

_HEADING_COMMANDS: tuple[CommandRef, ...] = tuple(
    CommandRef(
        f"format.heading.{depth}",
        FormattingAction.HEADING,
        depth=depth,
        description="Heading" if depth == MIN_HEADING_DEPTH else f"Subheading {depth - 2}",
    )
    for depth in range(MIN_HEADING_DEPTH, MAX_HEADING_DEPTH + 1)
)

DEFAULT_COMMANDS: tuple[CommandRef, ...] = _STYLE_COMMANDS + _HEADING_COMMANDS

DEFAULT_SHORTCUTS: tuple[Shortcut, ...] = (
    Shortcut("ctrl+b", "format.bold"),
    Shortcut("ctrl+i", "format.italic"),
    Shortcut("ctrl+u", "format.underline"),
    Shortcut("ctrl+shift+x", "format.strikethrough"),
    Shortcut("ctrl+shift+t", "format.template"),
    Shortcut("ctrl+shift+r", "format.reference"),
    Shortcut("ctrl+shift+p", "format.superscript"),
    Shortcut("ctrl+shift+s", "format.subscript"),
    Shortcut("ctrl+shift+8", "format.list.bullet"),
    Shortcut("ctrl+shift+7", "format.list.number"),
    Shortcut("ctrl+]", "format.indent"),
    Shortcut("ctrl+[", "format.unindent"),
) + tuple(
    Shortcut(f"ctrl+{depth}", f"format.heading.{depth}")
    for depth in range(MIN_HEADING_DEPTH, MAX_HEADING_DEPTH + 1)
)


def load_default_commands(
    registry: CommandRegistry,
    *,
    replace: bool = False,
    include_shortcuts: bool = True,
    exclude_commands: Sequence[str] | None = None,
    extra_shortcuts: Iterable[Shortcut] | None = None,
) -> None:
    """Register built-in commands and (optionally) their shortcuts."""

    excluded = set(exclude_commands or ())
    for command in DEFAULT_COMMANDS:
        if command.id in excluded:
            continue
        registry.register_command(command, replace=replace)

    if include_shortcuts:
        for shortcut in DEFAULT_SHORTCUTS:
            if shortcut.command_id in excluded:
                continue
            registry.register_shortcut(shortcut, replace=replace)

    for shortcut in extra_shortcuts or ():
        registry.register_shortcut(shortcut, replace=replace)


__all__ = ["DEFAULT_COMMANDS", "DEFAULT_SHORTCUTS", "load_default_commands"]
