"""UI-agnostic document editing core with a lexical scanner."""

__all__ = [
    "buffer",
    "config",
    "runtime",
    "scanner",
    "session",
]

__version__ = "0.1.0"
