import pytest

from wikitext_engine.commands import (
    DEFAULT_COMMANDS,
    DEFAULT_SHORTCUTS,
    CommandRef,
    CommandRegistry,
    Shortcut,
    ShortcutConflictError,
    load_default_commands,
    normalize_key,
)
from wikitext_engine.formatting import FormattingAction, FormattingRequest


def make_command(command_id: str = "format.test") -> CommandRef:
    return CommandRef(command_id, FormattingAction.BOLD, description="test")


def test_normalize_key_orders_modifiers() -> None:
    assert normalize_key("Shift+Ctrl+B") == "ctrl+shift+b"
    assert normalize_key("b", ("ctrl",)) == "ctrl+b"
    assert normalize_key("ESC") == "esc"
    with pytest.raises(ValueError):
        normalize_key("")


def test_heading_command_requires_depth() -> None:
    with pytest.raises(ValueError):
        CommandRef("format.heading", FormattingAction.HEADING)

    command = CommandRef("format.heading.4", FormattingAction.HEADING, depth=4)
    assert command.request == FormattingRequest(FormattingAction.HEADING, depth=4)


def test_register_command_rejects_duplicates() -> None:
    registry = CommandRegistry()
    registry.register_command(make_command())

    with pytest.raises(ValueError):
        registry.register_command(make_command())

    replacement = CommandRef("format.test", FormattingAction.ITALIC)
    registry.register_command(replacement, replace=True)
    assert registry.get_command("format.test") == replacement


def test_shortcut_requires_known_command() -> None:
    registry = CommandRegistry()

    with pytest.raises(KeyError):
        registry.register_shortcut(Shortcut("ctrl+b", "format.missing"))


def test_shortcut_conflict_detection() -> None:
    registry = CommandRegistry()
    registry.register_command(make_command("format.one"))
    registry.register_command(make_command("format.two"))
    registry.register_shortcut(Shortcut("ctrl+b", "format.one"))

    with pytest.raises(ShortcutConflictError):
        registry.register_shortcut(Shortcut("Ctrl+B", "format.two"))

    registry.register_shortcut(Shortcut("ctrl+b", "format.two"), replace=True)
    assert registry.resolve_key("b", ("ctrl",)).id == "format.two"


def test_unregister_shortcut() -> None:
    registry = CommandRegistry()
    registry.register_command(make_command())
    shortcut = registry.register_shortcut(Shortcut("ctrl+k", "format.test"))

    assert registry.unregister_shortcut("CTRL+K") == shortcut
    assert registry.resolve_key("ctrl+k") is None


def test_load_default_commands() -> None:
    registry = CommandRegistry()

    load_default_commands(registry)

    stats = registry.stats()
    assert stats.command_count == len(DEFAULT_COMMANDS)
    assert stats.shortcut_count == len(DEFAULT_SHORTCUTS)
    assert registry.resolve_key("ctrl+b").action is FormattingAction.BOLD
    assert registry.resolve_key("ctrl+3").depth == 3
    assert registry.shortcuts_for("format.indent") == ("ctrl+]",)


def test_load_default_commands_exclusions() -> None:
    registry = CommandRegistry()

    load_default_commands(
        registry,
        exclude_commands=("format.bold",),
        extra_shortcuts=(Shortcut("ctrl+shift+b", "format.italic"),),
    )

    with pytest.raises(KeyError):
        registry.get_command("format.bold")
    assert registry.resolve_key("ctrl+b") is None
    assert registry.resolve_key("b", ("shift", "ctrl")).id == "format.italic"
