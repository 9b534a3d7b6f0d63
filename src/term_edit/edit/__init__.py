"""Edit module - key handling that changes the document and cursor."""

from term_edit.edit.dispatcher import Action, InputDispatcher

__all__ = ["Action", "InputDispatcher"]
