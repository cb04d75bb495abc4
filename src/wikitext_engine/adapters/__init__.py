"""Host adapters for embedding the engine in UI toolkits."""

from .host import EditorHostAdapter, EditorUIHooks

__all__ = ["EditorHostAdapter", "EditorUIHooks"]
