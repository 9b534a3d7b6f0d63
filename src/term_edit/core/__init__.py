"""Core data structures: rows, documents, cursor and viewport state."""

from term_edit.core.row import Row
from term_edit.core.document import Document
from term_edit.core.session import Cursor, EditorConfig, EditorSession, StatusMessage
from term_edit.core.viewport import Viewport

__all__ = [
    "Row",
    "Document",
    "Cursor",
    "EditorConfig",
    "EditorSession",
    "StatusMessage",
    "Viewport",
]
