"""UI-agnostic wikitext formatting engine."""

__all__ = [
    "adapters",
    "attributes",
    "buffer",
    "commands",
    "config",
    "formatting",
    "runtime",
    "session",
]

__version__ = "0.1.0"
