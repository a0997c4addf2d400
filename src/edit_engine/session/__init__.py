"""Editing sessions tying a document to history, clipboard, and spans."""

from .editor import EditorSession, EditTransaction
from .hooks import SessionHooks

__all__ = ["EditorSession", "EditTransaction", "SessionHooks"]
