"""Buffer abstractions: document text, selection and host sync types."""

from .buffer import Buffer, BufferDelta, BufferView, Transaction
from .document import TextDocument
from .state import BufferState, Selection
from .sync import BufferMirror, BufferValidationError
from .validation import clamp_selection, ensure_selection

__all__ = [
    "Buffer",
    "BufferDelta",
    "BufferView",
    "Transaction",
    "TextDocument",
    "BufferState",
    "Selection",
    "BufferMirror",
    "BufferValidationError",
    "clamp_selection",
    "ensure_selection",
]
